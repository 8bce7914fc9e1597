"""The ``graph`` operation: render the component dependency graph."""

from __future__ import annotations

import os
from collections import deque
from pathlib import Path
from typing import Callable, Protocol

from archlint.models import (
    CmdGraphIn,
    CmdGraphOut,
    Component,
    GraphType,
    OutputType,
    Spec,
)
from archlint.reference import Project

__all__ = ["GraphOperation", "build_graph"]

GraphCompiler = Callable[[str], bytes]

_VENDOR_TEMPLATE = (
    "\n"
    "{{vnd}}.style.font-size: 12\n"
    '{{vnd}}.style.stroke: "#77AA44"\n'
    "{{cmp}} <- {{vnd}} {\n"
    '  style.stroke: "#77AA44"\n'
    "  source-arrowhead: {\n"
    "    shape: diamond\n"
    "    style.filled: false\n"
    "  }\n"
    "}\n"
)


class _SpecAssembler(Protocol):
    def assemble(self, project: Project) -> Spec: ...


class _ProjectInfoAssembler(Protocol):
    def project_info(self, root_directory: str, arch_file_path: str) -> Project: ...


class GraphOperation:
    """Build d2 definitions of the architecture and compile them into an SVG.

    ``compiler`` turns d2 definitions into SVG bytes.
    """

    def __init__(
        self,
        spec_assembler: _SpecAssembler,
        project_info_assembler: _ProjectInfoAssembler,
        compiler: GraphCompiler,
    ) -> None:
        self._spec_assembler = spec_assembler
        self._project_info_assembler = project_info_assembler
        self._compiler = compiler

    def behave(self, cmd: CmdGraphIn) -> CmdGraphOut:
        try:
            project = self._project_info_assembler.project_info(cmd.project_path, cmd.arch_file)
        except Exception as exc:
            raise RuntimeError(f"failed to assemble project info: {exc}") from exc

        try:
            spec = self._spec_assembler.assemble(project)
        except Exception as exc:
            raise RuntimeError(f"failed to assemble spec: {exc}") from exc

        try:
            graph_code = build_graph(spec, cmd)
        except Exception as exc:
            raise RuntimeError(f"failed build graph: {exc}") from exc

        try:
            svg = self._compiler(graph_code)
        except Exception as exc:
            raise RuntimeError(f"failed to compile graph: {exc}") from exc

        out_file = os.path.abspath(cmd.out_file)

        if _should_write_file(cmd):
            try:
                Path(out_file).write_bytes(svg)
            except OSError as exc:
                raise RuntimeError(
                    f"failed write graph into '{cmd.out_file}' file: {exc}"
                ) from exc

        return CmdGraphOut(
            project_directory=spec.root_directory.value,
            module_name=spec.module_name.value,
            out_file=out_file,
            d2_definitions=graph_code,
            export_d2=cmd.export_d2,
        )


def _should_write_file(cmd: CmdGraphIn) -> bool:
    return cmd.output_type != OutputType.JSON and not cmd.export_d2


def build_graph(spec: Spec, options: CmdGraphIn) -> str:
    """Return d2 definitions of the components visible under ``options``.

    Raises ValueError when the focused component is not defined.
    """
    visible = _whitelist(spec, options.focus)
    flow = _flow_arrow(options.type)

    lines: list[str] = []
    for cmp in spec.components:
        name = cmp.name.value
        if name not in visible:
            continue

        lines.extend(
            f"{name} {flow} {dep.value}\n"
            for dep in cmp.may_depend_on
            if dep.value in visible
        )

        if options.include_vendors:
            lines.extend(
                _VENDOR_TEMPLATE.replace("{{vnd}}", vnd.value).replace("{{cmp}}", name)
                for vnd in cmp.can_use
            )

    return "".join(line.replace("\t", "") for line in sorted(lines))


def _flow_arrow(graph_type: GraphType) -> str:
    if graph_type == GraphType.FLOW:
        return "->"
    if graph_type == GraphType.DI:
        return "<-"
    return "--"


def _whitelist(spec: Spec, focus: str) -> set[str]:
    if not focus:
        return {cmp.name.value for cmp in spec.components}
    return _focused_whitelist(spec, focus)


def _focused_whitelist(spec: Spec, focus: str) -> set[str]:
    components: dict[str, Component] = {cmp.name.value: cmp for cmp in spec.components}
    if focus not in components:
        raise ValueError(f"focused cmp {focus} is not defined")

    visible: set[str] = set()
    resolved: set[str] = set()
    queue = deque([focus])

    while queue:
        name = queue.popleft()
        if name in resolved:
            continue
        resolved.add(name)
        visible.add(name)

        cmp = components.get(name)
        if cmp is None:
            continue
        for dep in cmp.may_depend_on:
            visible.add(dep.value)
            queue.append(dep.value)

    return visible