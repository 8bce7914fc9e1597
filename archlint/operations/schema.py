"""The ``schema`` operation: output the JSON schema of an arch file version."""

from __future__ import annotations

import json
from typing import Protocol, Union

from archlint.models import CmdSchemaIn, CmdSchemaOut

__all__ = ["SchemaOperation"]

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class _JsonSchemaProvider(Protocol):
    def provide(self, version: int) -> bytes: ...


def _parse_number(text: str) -> Union[int, float]:
    value = float(text)
    if value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _compact(data: object) -> str:
    text = json.dumps(data, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    return text


class SchemaOperation:
    """Provide a JSON schema and reformat it as a single line."""

    def __init__(self, json_schema_provider: _JsonSchemaProvider) -> None:
        self._json_schema_provider = json_schema_provider

    def behave(self, cmd: CmdSchemaIn) -> CmdSchemaOut:
        try:
            raw = self._json_schema_provider.provide(cmd.version)
        except Exception as exc:
            raise RuntimeError(f"failed to provide json schema: {exc}") from exc

        try:
            data = json.loads(raw, parse_float=_parse_number)
        except ValueError as exc:
            raise ValueError(f"failed to unmarshal json: {exc}") from exc

        return CmdSchemaOut(version=cmd.version, json_schema=_compact(data))