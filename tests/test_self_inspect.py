import pytest

from archlint.models import CmdSelfInspectIn, Integrity, Notice, Spec
from archlint.operations.self_inspect import SelfInspectOperation
from archlint.reference import Project, single_line_reference


class FakeInfo:
    def __init__(self):
        self.calls = []

    def project_info(self, root_directory, arch_file_path):
        self.calls.append((root_directory, arch_file_path))
        return Project("/prj", "/prj/.go-arch-lint.yml", "/prj/go.mod", "example.com/prj")


class FakeAssembler:
    def __init__(self, spec=None, fail=False):
        self.spec = spec or Spec()
        self.fail = fail

    def assemble(self, project):
        if self.fail:
            raise ValueError("broken yaml")
        return self.spec


def test_reports_project_and_version():
    out = SelfInspectOperation(FakeAssembler(), FakeInfo(), "1.0.0").behave(CmdSelfInspectIn())
    assert out.module_name == "example.com/prj"
    assert out.root_directory == "/prj"
    assert out.linter_version == "1.0.0"
    assert out.notices == [] and out.suggestions == []


def test_notices_and_suggestions_become_annotations():
    ref = single_line_reference("/prj/.go-arch-lint.yml", 4, 2)
    spec = Spec(
        integrity=Integrity(
            document_notices=[Notice(ValueError("unknown component 'x'"), ref)],
            suggestions=[Notice(ValueError("hint"), ref)],
        )
    )
    out = SelfInspectOperation(FakeAssembler(spec), FakeInfo(), "v").behave(CmdSelfInspectIn())
    assert [a.text for a in out.notices] == ["unknown component 'x'"]
    assert out.notices[0].reference == ref
    assert [a.text for a in out.suggestions] == ["hint"]


def test_passes_paths_to_project_info():
    info = FakeInfo()
    SelfInspectOperation(FakeAssembler(), info, "v").behave(
        CmdSelfInspectIn(project_path="/x", arch_file="a.yml")
    )
    assert info.calls == [("/x", "a.yml")]


def test_assemble_failure_is_wrapped():
    with pytest.raises(RuntimeError, match="failed assemble spec: broken yaml"):
        SelfInspectOperation(FakeAssembler(fail=True), FakeInfo(), "v").behave(CmdSelfInspectIn())