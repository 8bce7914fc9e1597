"""The ``check`` operation: lint a project against its architecture file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from archlint.errors import UserSpaceError
from archlint.models import (
    CheckNotice,
    CheckQuality,
    CheckResult,
    CmdCheckIn,
    CmdCheckOut,
    Integrity,
    Spec,
)
from archlint.reference import Project, Reference

__all__ = ["CheckOperation"]


class _ProjectInfoAssembler(Protocol):
    def project_info(self, root_directory: str, arch_file_path: str) -> Project: ...


class _SpecAssembler(Protocol):
    def assemble(self, project: Project) -> Spec: ...


class _SpecChecker(Protocol):
    def check(self, spec: Spec) -> CheckResult: ...


class _ReferenceRender(Protocol):
    def source_code(self, ref: Reference, highlight: bool, show_pointer: bool) -> bytes: ...


@dataclass
class _Limited:
    results: CheckResult
    omitted_count: int


class CheckOperation:
    """Assemble the spec, run the checkers and build the check report."""

    def __init__(
        self,
        project_info_assembler: _ProjectInfoAssembler,
        spec_assembler: _SpecAssembler,
        spec_checker: _SpecChecker,
        reference_render: _ReferenceRender,
        highlight_code_preview: bool,
    ) -> None:
        self._project_info_assembler = project_info_assembler
        self._spec_assembler = spec_assembler
        self._spec_checker = spec_checker
        self._reference_render = reference_render
        self._highlight_code_preview = highlight_code_preview

    def behave(self, cmd: CmdCheckIn) -> CmdCheckOut:
        """Run the check.

        Returns the report when the project is clean; otherwise raises
        UserSpaceError carrying the report as its payload.
        """
        try:
            project = self._project_info_assembler.project_info(cmd.project_path, cmd.arch_file)
        except Exception as exc:
            raise RuntimeError(f"failed to assemble project info: {exc}") from exc

        try:
            spec = self._spec_assembler.assemble(project)
        except Exception as exc:
            raise RuntimeError(f"failed to assemble spec: {exc}") from exc

        result = CheckResult()
        if not spec.integrity.document_notices:
            try:
                result = self._spec_checker.check(spec)
            except Exception as exc:
                raise RuntimeError(f"failed to check project deps: {exc}") from exc

        limited = _limit_results(result, cmd.max_warnings)

        model = CmdCheckOut(
            module_name=spec.module_name.value,
            document_notices=self._assemble_notices(spec.integrity),
            arch_has_warnings=limited.results.has_notices(),
            arch_warnings_dependency=limited.results.dependency_warnings,
            arch_warnings_match=limited.results.match_warnings,
            arch_warnings_deep_scan=limited.results.deepscan_warnings,
            omitted_count=limited.omitted_count,
            qualities=[
                CheckQuality(
                    id="component_imports",
                    name="Base: component imports",
                    used=len(spec.components) > 0,
                    hint="always on",
                ),
                CheckQuality(
                    id="vendor_imports",
                    name="Advanced: vendor imports",
                    used=spec.allow.dep_on_any_vendor.value is False,
                    hint="switch 'allow.depOnAnyVendor = false' (or delete) to on",
                ),
                CheckQuality(
                    id="deepscan",
                    name="Advanced: method calls and dependency injections",
                    used=spec.allow.deep_scan.value is True,
                    hint="switch 'allow.deepScan = true' (or delete) to on",
                ),
            ],
        )

        if model.arch_has_warnings or model.document_notices:
            raise UserSpaceError("check not successful", model)

        return model

    def _assemble_notices(self, integrity: Integrity) -> list[CheckNotice]:
        results = [
            CheckNotice(
                text=str(notice.notice),
                file=notice.ref.file,
                line=notice.ref.line,
                column=notice.ref.column,
                source_code_preview=self._reference_render.source_code(
                    notice.ref.extend_range(1, 1),
                    self._highlight_code_preview,
                    True,
                ),
            )
            for notice in integrity.document_notices
        ]
        results.sort(key=lambda item: (item.file, item.line))
        return results


def _limit_results(result: CheckResult, max_warnings: int) -> _Limited:
    budget = max(max_warnings, 0)

    dependency = result.dependency_warnings[:budget]
    budget -= len(dependency)
    match = result.match_warnings[:budget]
    budget -= len(match)
    deepscan = result.deepscan_warnings[:budget]

    passed = len(dependency) + len(match) + len(deepscan)
    total = (
        len(result.dependency_warnings)
        + len(result.match_warnings)
        + len(result.deepscan_warnings)
    )

    return _Limited(
        results=CheckResult(
            dependency_warnings=list(dependency),
            match_warnings=list(match),
            deepscan_warnings=list(deepscan),
        ),
        omitted_count=total - passed,
    )