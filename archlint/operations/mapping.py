"""The ``mapping`` operation: map project files to architecture components."""

from __future__ import annotations

from typing import Optional, Protocol

from archlint.models import (
    CmdMappingIn,
    CmdMappingOut,
    CmdMappingOutGrouped,
    CmdMappingOutList,
    FileHold,
    Spec,
)
from archlint.reference import Project

__all__ = ["MappingOperation", "component_name"]

_NOT_ATTACHED = "[not attached]"


class _SpecAssembler(Protocol):
    def assemble(self, project: Project) -> Spec: ...


class _ProjectFilesResolver(Protocol):
    def project_files(self, spec: Spec) -> list[FileHold]: ...


class _ProjectInfoAssembler(Protocol):
    def project_info(self, root_directory: str, arch_file_path: str) -> Project: ...


class MappingOperation:
    """Resolve project files and group them by component."""

    def __init__(
        self,
        spec_assembler: _SpecAssembler,
        project_files_resolver: _ProjectFilesResolver,
        project_info_assembler: _ProjectInfoAssembler,
    ) -> None:
        self._spec_assembler = spec_assembler
        self._project_files_resolver = project_files_resolver
        self._project_info_assembler = project_info_assembler

    def behave(self, cmd: CmdMappingIn) -> CmdMappingOut:
        try:
            project = self._project_info_assembler.project_info(cmd.project_path, cmd.arch_file)
        except Exception as exc:
            raise RuntimeError(f"failed to assemble project info: {exc}") from exc

        try:
            spec = self._spec_assembler.assemble(project)
        except Exception as exc:
            raise RuntimeError(f"failed to assemble spec: {exc}") from exc

        try:
            files = self._project_files_resolver.project_files(spec)
        except Exception as exc:
            raise RuntimeError(f"failed to resolve project files: {exc}") from exc

        return CmdMappingOut(
            project_directory=spec.root_directory.value,
            module_name=spec.module_name.value,
            mapping_grouped=_mapping_by_component(spec, files),
            mapping_list=_mapping_by_file(files),
            scheme=cmd.scheme,
        )


def component_name(component_id: Optional[str]) -> str:
    """Display name of a component id, with a marker for unattached files."""
    return _NOT_ATTACHED if component_id is None else component_id


def _mapping_by_component(spec: Spec, files: list[FileHold]) -> list[CmdMappingOutGrouped]:
    by_component: dict[str, list[str]] = {}
    for hold in files:
        by_component.setdefault(component_name(hold.component_id), []).append(hold.file.path)

    mapping = [
        CmdMappingOutGrouped(
            component_name=cmp.name.value,
            file_names=sorted(by_component.get(cmp.name.value, [])),
        )
        for cmp in spec.components
    ]

    not_attached = by_component.get(_NOT_ATTACHED)
    if not_attached:
        mapping.append(
            CmdMappingOutGrouped(component_name=_NOT_ATTACHED, file_names=sorted(not_attached))
        )

    mapping.sort(key=lambda item: item.component_name)
    return mapping


def _mapping_by_file(files: list[FileHold]) -> list[CmdMappingOutList]:
    seen: dict[str, CmdMappingOutList] = {}
    for hold in files:
        path = hold.file.path
        if path not in seen:
            seen[path] = CmdMappingOutList(
                file_name=path, component_name=component_name(hold.component_id)
            )
    return sorted(seen.values(), key=lambda item: item.file_name)