"""The ``version`` operation: report linter version and build details."""

from __future__ import annotations

from importlib import metadata
from typing import Optional

from archlint.models import (
    SUPPORTED_VERSION_MAX,
    SUPPORTED_VERSION_MIN,
    UNKNOWN_VERSION,
    CmdVersionOut,
)

__all__ = ["VersionOperation", "VERSION", "BUILD_TIME", "COMMIT_HASH"]

VERSION = UNKNOWN_VERSION
BUILD_TIME = "unknown"
COMMIT_HASH = "unknown"

_DISTRIBUTION = "archlint"


class VersionOperation:
    """Describe the running linter build."""

    def __init__(
        self,
        version: str = VERSION,
        build_time: str = BUILD_TIME,
        commit_hash: str = COMMIT_HASH,
    ) -> None:
        self._version = version
        self._build_time = build_time
        self._commit_hash = commit_hash

    def behave(self) -> CmdVersionOut:
        if self._version == UNKNOWN_VERSION:
            installed = self._from_package_metadata()
            if installed is not None:
                return installed
        return CmdVersionOut(
            linter_version=self._version,
            go_arch_file_supported=_supported_schemas(),
            build_time=self._build_time,
            commit_hash=self._commit_hash,
        )

    @staticmethod
    def _from_package_metadata() -> Optional[CmdVersionOut]:
        try:
            installed = metadata.version(_DISTRIBUTION)
        except metadata.PackageNotFoundError:
            return None
        if not installed:
            return None
        return CmdVersionOut(
            linter_version=installed,
            go_arch_file_supported=_supported_schemas(),
            build_time="unknown",
            commit_hash="unknown",
        )


def _supported_schemas() -> str:
    return f"{SUPPORTED_VERSION_MIN} .. {SUPPORTED_VERSION_MAX}"