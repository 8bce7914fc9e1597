import pytest

from archlint.models import (
    CmdMappingIn,
    Component,
    FileHold,
    MappingScheme,
    ProjectFile,
    Spec,
)
from archlint.operations.mapping import MappingOperation, component_name
from archlint.reference import Project, Referable, empty_referable


def _spec(*names):
    return Spec(
        root_directory=empty_referable("/project"),
        module_name=empty_referable("example.com/mod"),
        components=[Component(name=Referable(n)) for n in names],
    )


def _hold(path, cmp):
    return FileHold(file=ProjectFile(path=path), component_id=cmp)


class _Info:
    def project_info(self, root_directory, arch_file_path):
        return Project(root_directory, arch_file_path, "go.mod", "example.com/mod")


class _Assembler:
    def __init__(self, spec):
        self.spec = spec

    def assemble(self, project):
        return self.spec


class _Files:
    def __init__(self, files=None, error=None):
        self.files = files or []
        self.error = error

    def project_files(self, spec):
        if self.error:
            raise self.error
        return self.files


def _run(spec, files, scheme=MappingScheme.LIST):
    op = MappingOperation(_Assembler(spec), _Files(files), _Info())
    return op.behave(CmdMappingIn(scheme=scheme))


def test_component_name():
    assert component_name(None) == "[not attached]"
    assert component_name("core") == "core"


def test_grouped_mapping():
    files = [
        _hold("f2.go", "a"),
        _hold("f1.go", "a"),
        _hold("f3.go", None),
        _hold("f4.go", "ghost"),
    ]
    out = _run(_spec("b", "a"), files)
    grouped = {g.component_name: g.file_names for g in out.mapping_grouped}
    assert grouped == {"a": ["f1.go", "f2.go"], "b": [], "[not attached]": ["f3.go"]}
    names = [g.component_name for g in out.mapping_grouped]
    assert names == sorted(names)


def test_grouped_without_unattached_files():
    out = _run(_spec("a"), [_hold("x.go", "a")])
    assert [g.component_name for g in out.mapping_grouped] == ["a"]


def test_list_mapping_dedups_and_sorts():
    files = [_hold("z.go", "a"), _hold("m.go", None), _hold("z.go", "b")]
    out = _run(_spec("a", "b"), files)
    assert [(m.file_name, m.component_name) for m in out.mapping_list] == [
        ("m.go", "[not attached]"),
        ("z.go", "a"),
    ]


def test_output_fields():
    out = _run(_spec("a"), [], scheme=MappingScheme.GROUPED)
    assert out.project_directory == "/project"
    assert out.module_name == "example.com/mod"
    assert out.scheme == MappingScheme.GROUPED
    assert out.mapping_list == []


def test_resolver_error_is_wrapped():
    op = MappingOperation(_Assembler(_spec("a")), _Files(error=OSError("boom")), _Info())
    with pytest.raises(RuntimeError, match="failed to resolve project files: boom"):
        op.behave(CmdMappingIn())