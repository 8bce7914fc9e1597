# archlint

`archlint` is the core of an architecture linter. An architecture file splits
a project into named components and states which components and third-party
packages each of them may depend on. This package holds the model of such a
specification and the operations that build reports from it.

## Operations

Each operation lives in `archlint.operations` and has a single `behave`
method:

- `check.CheckOperation`: runs a spec checker over an assembled spec, unless
  the spec already has document notices. It caps the reported warnings at
  `CmdCheckIn.max_warnings` (dependency warnings first, then unmatched files,
  then deep-scan warnings), counts the rest in `omitted_count`, sorts document
  notices by file and line and lists the quality checks that are active.
  When there are warnings or notices it raises `UserSpaceError` with the
  `CmdCheckOut` report attached as `payload`.
- `mapping.MappingOperation`: shows which project files belong to which
  component, both as a flat list sorted by file name and grouped by component.
  Files without a component appear under `[not attached]`
  (see `mapping.component_name`).
- `graph.GraphOperation`: turns component dependencies into d2 diagram
  definitions with `graph.build_graph(spec, options)`, either for the whole
  spec or, with `CmdGraphIn.focus`, for one component and everything it
  reaches. `GraphType.FLOW` draws `->`, `GraphType.DI` draws `<-`, and
  `include_vendors` adds the vendors from each component's `can_use` list.
  The definitions are handed to a compiler callable that returns SVG bytes;
  the result is written to `out_file` unless the output type is JSON or
  `export_d2` is set.
- `schema.SchemaOperation`: fetches the JSON schema for an architecture file
  version and returns it reformatted on one line, with sorted keys.
- `self_inspect.SelfInspectOperation`: lists the notices and suggestions found
  in an architecture file, each with its source reference.
- `version.VersionOperation`: reports the linter version, build time, commit
  hash and the supported architecture file versions (`"1 .. 3"`). When the
  version is `"dev"` and the `archlint` distribution is installed, the
  installed version is reported instead.

## Services you supply

The operations do not read projects themselves. Each takes the services it
needs when it is created; any object with these methods will do:

| Service | Method |
| --- | --- |
| project info assembler | `project_info(root_directory, arch_file_path) -> Project` |
| spec assembler | `assemble(project) -> Spec` |
| spec checker | `check(spec) -> CheckResult` |
| reference render | `source_code(ref, highlight, show_pointer) -> bytes` |
| project files resolver | `project_files(spec) -> list[FileHold]` |
| JSON schema provider | `provide(version) -> bytes` |
| graph compiler | a callable taking d2 text and returning SVG bytes |

A failure in any of them is re-raised as `RuntimeError` with a message saying
which step failed.

## Source references

Every value read from an architecture file can carry a `Reference`: the file,
the line and the column it came from, plus a line range used for code
previews.

```python
from archlint.reference import single_line_reference

ref = single_line_reference("/tmp/dev", 22, 0)
preview = ref.extend_range(3, 3).clamp_with_real_lines_count(37)
print(preview)                             # /tmp/dev:22
print(preview.line_from, preview.line_to)  # 19 25
```

`empty_reference()` stands for an unknown location and prints as
`<unknown_file_ref>`. A `Referable` pairs a value with its reference, and
`empty_referable(value)` gives one without a location. `Project` holds the
project directory, the architecture and module file paths and the module name.

## Import globs

Vendor rules are written as globs. `*` matches one path segment and `**`
matches any number of them:

```python
from archlint.glob import Glob

rule = Glob("github.com/**/library/*/abc")
rule.match("github.com/a/b/c/library/any/abc")  # True
rule.match("github.com/a/b/c/library/any")      # False
```

`Glob.to_regex()` returns the equivalent regular expression; `match` raises
`ValueError` when the glob does not form a valid one.

## Errors

`archlint.errors.UserSpaceError` means the operation finished and its report
explains the failure; the report is in `payload`. `ReferableError` wraps an
error together with the `Reference` it belongs to. Any other exception means
the operation could not run.

## Models

`archlint.models` holds the input and output records of every operation
(`CmdCheckIn`, `CmdCheckOut`, `CmdGraphIn`, `CmdMappingOut`, and so on), the
assembled `Spec` with its `Component`, `Allow`, `SpecialFlags`, `Integrity`
and `Notice` parts, and `CheckResult` with `append` and `has_notices`.
`to_json(model)` turns any record into plain JSON data under the field names
of the JSON output, leaving out fields that are not part of it.

## What this package does not do

There is no command-line program. The package does not read or validate
architecture files, does not scan source files or resolve their imports, does
not render code previews or draw SVG diagrams, and ships no JSON schemas:
those are the services listed above, and you provide them.

## Running the tests

Install the `test` extra and run `pytest` from the project root.