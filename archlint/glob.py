"""Path globs where ``*`` matches one segment and ``**`` any number of them."""

from __future__ import annotations

import re

__all__ = ["Glob"]


class Glob(str):
    """A path pattern such as ``github.com/**/library/*/abc``."""

    def to_regex(self) -> str:
        """Regular expression equivalent to this glob."""
        pattern = str(self).replace(".", "\\.").replace("/", "\\/")
        pattern = pattern.replace("**", "<M_ALL>")
        pattern = pattern.replace("*", "[^\\/]+")
        pattern = pattern.replace("<M_ALL>", ".*")
        return f"^{pattern}$"

    def match(self, tested_path: str) -> bool:
        """Whether ``tested_path`` is matched by this glob.

        Raises ValueError when the glob does not form a valid expression.
        """
        pattern = self.to_regex()
        try:
            matcher = re.compile(pattern)
        except re.error as exc:
            raise ValueError(
                f"failed compile glob '{self}' as regexp '{pattern}': {exc}"
            ) from exc
        return matcher.fullmatch(tested_path) is not None