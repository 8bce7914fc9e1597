"""The ``self-inspect`` operation: validate the arch file setup."""

from __future__ import annotations

from typing import Protocol

from archlint.models import (
    CmdSelfInspectIn,
    CmdSelfInspectOut,
    CmdSelfInspectOutAnnotation,
    Notice,
    Spec,
)
from archlint.reference import Project

__all__ = ["SelfInspectOperation"]


class _SpecAssembler(Protocol):
    def assemble(self, project: Project) -> Spec: ...


class _ProjectInfoAssembler(Protocol):
    def project_info(self, root_directory: str, arch_file_path: str) -> Project: ...


class SelfInspectOperation:
    """Report notices and suggestions found in the arch file."""

    def __init__(
        self,
        spec_assembler: _SpecAssembler,
        project_info_assembler: _ProjectInfoAssembler,
        version: str,
    ) -> None:
        self._spec_assembler = spec_assembler
        self._project_info_assembler = project_info_assembler
        self._version = version

    def behave(self, cmd: CmdSelfInspectIn) -> CmdSelfInspectOut:
        try:
            project = self._project_info_assembler.project_info(cmd.project_path, cmd.arch_file)
        except Exception as exc:
            raise RuntimeError(f"failed to assemble project info: {exc}") from exc

        try:
            spec = self._spec_assembler.assemble(project)
        except Exception as exc:
            raise RuntimeError(f"failed assemble spec: {exc}") from exc

        return CmdSelfInspectOut(
            module_name=project.module_name,
            root_directory=project.directory,
            linter_version=self._version,
            notices=_annotations(spec.integrity.document_notices),
            suggestions=_annotations(spec.integrity.suggestions),
        )


def _annotations(notices: list[Notice]) -> list[CmdSelfInspectOutAnnotation]:
    return [
        CmdSelfInspectOutAnnotation(text=str(notice.notice), reference=notice.ref)
        for notice in notices
    ]