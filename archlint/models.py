"""Data models shared by the linter operations."""

from __future__ import annotations

import base64
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum, IntEnum
from typing import Any, Optional

from archlint.glob import Glob
from archlint.reference import Referable, Reference, empty_referable

UNKNOWN_VERSION = "dev"

DEFAULT_PROJECT_PATH = "./"
DEFAULT_ARCH_FILE_NAME = ".go-arch-lint.yml"
DEFAULT_GO_MOD_FILE_NAME = "go.mod"

SUPPORTED_VERSION_MIN = 1
SUPPORTED_VERSION_MAX = 3


def _js(name: Optional[str], **kwargs: Any) -> Any:
    """Dataclass field carrying its serialized name (None omits it)."""
    return field(metadata={"json": name}, **kwargs)


class OutputType(str, Enum):
    DEFAULT = "default"
    ASCII = "ascii"
    JSON = "json"


OUTPUT_TYPE_VALUES = (OutputType.ASCII, OutputType.JSON)


class GraphType(str, Enum):
    FLOW = "flow"
    DI = "di"


GRAPH_TYPES_VALUES = (GraphType.FLOW, GraphType.DI)


class MappingScheme(str, Enum):
    GROUPED = "grouped"
    LIST = "list"


MAPPING_SCHEMES_VALUES = (MappingScheme.LIST, MappingScheme.GROUPED)


class ImportType(IntEnum):
    STD_LIB = 0
    PROJECT = 1
    VENDOR = 2


@dataclass
class FlagsRoot:
    use_colors: bool = True
    output_type: OutputType = OutputType.DEFAULT
    output_json_one_line: bool = False


# --- check


@dataclass
class CmdCheckIn:
    project_path: str = DEFAULT_PROJECT_PATH
    arch_file: str = DEFAULT_ARCH_FILE_NAME
    max_warnings: int = 100


@dataclass
class CheckQuality:
    id: str = _js("ID")
    used: bool = _js("Used")
    name: str = _js(None, default="")
    hint: str = _js(None, default="")


@dataclass
class CheckNotice:
    text: str = _js("Text")
    file: str = _js("File")
    line: int = _js("Line")
    column: int = _js("Offset")
    source_code_preview: bytes = _js(None, default=b"")


@dataclass
class CheckArchWarningDependency:
    component_name: str = _js("ComponentName")
    file_relative_path: str = _js("FileRelativePath")
    file_absolute_path: str = _js("FileAbsolutePath")
    resolved_import_name: str = _js("ResolvedImportName")
    reference: Reference = _js("Reference", default_factory=Reference)


@dataclass
class CheckArchWarningMatch:
    file_relative_path: str = _js("FileRelativePath")
    file_absolute_path: str = _js("FileAbsolutePath")
    reference: Reference = _js(None, default_factory=Reference)


@dataclass
class DeepscanWarningGate:
    component_name: str = _js("ComponentName")
    method_name: str = _js("MethodName")
    definition: Reference = _js("Definition", default_factory=Reference)
    relative_path: str = _js(None, default="")


@dataclass
class DeepscanWarningDependency:
    component_name: str = _js("ComponentName")
    name: str = _js("Name")
    injection_ast: str = _js("InjectionAST")
    injection: Reference = _js("Injection", default_factory=Reference)
    injection_path: str = _js(None, default="")
    source_code_preview: bytes = _js(None, default=b"")


@dataclass
class DeepscanWarningTarget:
    definition: Reference = _js("Definition", default_factory=Reference)
    relative_path: str = _js(None, default="")


@dataclass
class CheckArchWarningDeepscan:
    gate: DeepscanWarningGate = _js("Gate")
    dependency: DeepscanWarningDependency = _js("Dependency")
    target: DeepscanWarningTarget = _js("Target")


@dataclass
class CmdCheckOut:
    document_notices: list[CheckNotice] = _js("ExecutionWarnings", default_factory=list)
    arch_has_warnings: bool = _js("ArchHasWarnings", default=False)
    arch_warnings_dependency: list[CheckArchWarningDependency] = _js(
        "ArchWarningsDeps", default_factory=list
    )
    arch_warnings_match: list[CheckArchWarningMatch] = _js(
        "ArchWarningsNotMatched", default_factory=list
    )
    arch_warnings_deep_scan: list[CheckArchWarningDeepscan] = _js(
        "ArchWarningsDeepScan", default_factory=list
    )
    omitted_count: int = _js("OmittedCount", default=0)
    module_name: str = _js("ModuleName", default="")
    qualities: list[CheckQuality] = _js("Qualities", default_factory=list)


@dataclass
class CheckResult:
    dependency_warnings: list[CheckArchWarningDependency] = field(default_factory=list)
    match_warnings: list[CheckArchWarningMatch] = field(default_factory=list)
    deepscan_warnings: list[CheckArchWarningDeepscan] = field(default_factory=list)

    def append(self, another: CheckResult) -> None:
        """Add all warnings of ``another`` to this result."""
        self.dependency_warnings.extend(another.dependency_warnings)
        self.match_warnings.extend(another.match_warnings)
        self.deepscan_warnings.extend(another.deepscan_warnings)

    def has_notices(self) -> bool:
        """Whether any warning is present."""
        return bool(self.dependency_warnings or self.match_warnings or self.deepscan_warnings)


# --- error


@dataclass
class CmdErrorOut:
    error: str = _js("Error")


# --- graph


@dataclass
class CmdGraphIn:
    project_path: str = DEFAULT_PROJECT_PATH
    arch_file: str = DEFAULT_ARCH_FILE_NAME
    type: GraphType = GraphType.FLOW
    out_file: str = "./go-arch-lint-graph.svg"
    focus: str = ""
    include_vendors: bool = False
    export_d2: bool = False
    output_type: OutputType = OutputType.ASCII


@dataclass
class CmdGraphOut:
    project_directory: str = _js("ProjectDirectory")
    module_name: str = _js("ModuleName")
    out_file: str = _js("OutFile")
    d2_definitions: str = _js("D2Definitions")
    export_d2: bool = _js(None, default=False)


# --- mapping


@dataclass
class CmdMappingIn:
    project_path: str = DEFAULT_PROJECT_PATH
    arch_file: str = DEFAULT_ARCH_FILE_NAME
    scheme: MappingScheme = MappingScheme.LIST


@dataclass
class CmdMappingOutGrouped:
    component_name: str = _js("ComponentName")
    file_names: list[str] = _js("FileNames", default_factory=list)


@dataclass
class CmdMappingOutList:
    file_name: str = _js("FileName")
    component_name: str = _js("ComponentName")


@dataclass
class CmdMappingOut:
    project_directory: str = _js("ProjectDirectory")
    module_name: str = _js("ModuleName")
    mapping_grouped: list[CmdMappingOutGrouped] = _js("MappingGrouped", default_factory=list)
    mapping_list: list[CmdMappingOutList] = _js("MappingList", default_factory=list)
    scheme: MappingScheme = _js(None, default=MappingScheme.LIST)


# --- schema


@dataclass
class CmdSchemaIn:
    version: int = 0


@dataclass
class CmdSchemaOut:
    version: int = _js("Version")
    json_schema: str = _js("JsonSchema")


# --- self inspect


@dataclass
class CmdSelfInspectIn:
    project_path: str = DEFAULT_PROJECT_PATH
    arch_file: str = DEFAULT_ARCH_FILE_NAME


@dataclass
class CmdSelfInspectOutAnnotation:
    text: str = _js("Text")
    reference: Reference = _js("Reference", default_factory=Reference)


@dataclass
class CmdSelfInspectOut:
    module_name: str = _js("ModuleName")
    root_directory: str = _js("RootDirectory")
    linter_version: str = _js("LinterVersion")
    notices: list[CmdSelfInspectOutAnnotation] = _js("Notices", default_factory=list)
    suggestions: list[CmdSelfInspectOutAnnotation] = _js("Suggestions", default_factory=list)


# --- version


@dataclass
class CmdVersionOut:
    linter_version: str = _js("LinterVersion")
    go_arch_file_supported: str = _js("GoArchFileSupported")
    build_time: str = _js("BuildTime")
    commit_hash: str = _js("CommitHash")


# --- resolved files


@dataclass(frozen=True)
class ResolvedImport:
    name: str
    import_type: ImportType
    reference: Reference = field(default_factory=Reference)


@dataclass
class ProjectFile:
    path: str
    imports: list[ResolvedImport] = field(default_factory=list)


@dataclass
class FileHold:
    file: ProjectFile
    component_id: Optional[str] = None


@dataclass(frozen=True)
class ResolvedPath:
    import_path: str
    local_path: str
    abs_path: str


# --- arch spec


@dataclass
class Notice:
    notice: BaseException
    ref: Reference = field(default_factory=Reference)


@dataclass
class Integrity:
    document_notices: list[Notice] = field(default_factory=list)
    suggestions: list[Notice] = field(default_factory=list)


@dataclass
class Allow:
    dep_on_any_vendor: Referable[bool] = field(default_factory=lambda: empty_referable(False))
    deep_scan: Referable[bool] = field(default_factory=lambda: empty_referable(False))


@dataclass
class SpecialFlags:
    allow_all_project_deps: Referable[bool] = field(
        default_factory=lambda: empty_referable(False)
    )
    allow_all_vendor_deps: Referable[bool] = field(
        default_factory=lambda: empty_referable(False)
    )


@dataclass
class Component:
    name: Referable[str]
    deep_scan: Referable[bool] = field(default_factory=lambda: empty_referable(False))
    resolved_paths: list[Referable[ResolvedPath]] = field(default_factory=list)
    allowed_project_imports: list[Referable[ResolvedPath]] = field(default_factory=list)
    allowed_vendor_globs: list[Referable[Glob]] = field(default_factory=list)
    may_depend_on: list[Referable[str]] = field(default_factory=list)
    can_use: list[Referable[str]] = field(default_factory=list)
    special_flags: SpecialFlags = field(default_factory=SpecialFlags)


@dataclass
class Spec:
    root_directory: Referable[str] = field(default_factory=lambda: empty_referable(""))
    working_directory: Referable[str] = field(default_factory=lambda: empty_referable(""))
    module_name: Referable[str] = field(default_factory=lambda: empty_referable(""))
    allow: Allow = field(default_factory=Allow)
    components: list[Component] = field(default_factory=list)
    exclude: list[Referable[ResolvedPath]] = field(default_factory=list)
    exclude_files_matcher: list[Referable[re.Pattern]] = field(default_factory=list)
    integrity: Integrity = field(default_factory=Integrity)


def to_json(model: Any) -> Any:
    """Return a JSON-compatible structure for ``model`` using output field names."""
    if isinstance(model, Enum):
        return model.value
    if isinstance(model, BaseException):
        return str(model)
    if is_dataclass(model) and not isinstance(model, type):
        out = {}
        for f in fields(model):
            name = f.metadata.get("json", f.name)
            if name is None:
                continue
            out[name] = to_json(getattr(model, f.name))
        return out
    if isinstance(model, re.Pattern):
        return model.pattern
    if isinstance(model, (bytes, bytearray)):
        return base64.b64encode(bytes(model)).decode("ascii")
    if isinstance(model, Mapping):
        return {str(key): to_json(value) for key, value in model.items()}
    if isinstance(model, (list, tuple)):
        return [to_json(item) for item in model]
    return model