import re

import pytest

from archlint.glob import Glob

DOC_GLOB = Glob("github.com/**/library/*/abc")


@pytest.mark.parametrize(
    "path",
    [
        "github.com/a/b/c/library/any/abc",
        "github.com/x/library/y/abc",
    ],
)
def test_glob_matches(path):
    assert DOC_GLOB.match(path) is True


@pytest.mark.parametrize(
    "path",
    [
        "github.com/a/b/c/library/any",
        "github.com/library/another/awesome",
        "github.com/a/library/x/y/abc",
        "githubXcom/a/library/x/abc",
    ],
)
def test_glob_does_not_match(path):
    assert DOC_GLOB.match(path) is False


def test_to_regex():
    assert DOC_GLOB.to_regex() == r"^github\.com\/.*\/library\/[^\/]+\/abc$"


def test_regex_is_anchored():
    regex = Glob("a/*").to_regex()
    assert regex.startswith("^") and regex.endswith("$")
    assert re.fullmatch(regex, "a/b") is not None


def test_single_star_stays_in_segment():
    glob = Glob("internal/*")
    assert glob.match("internal/app") is True
    assert glob.match("internal/app/models") is False


def test_exact_path():
    glob = Glob("internal/app")
    assert glob.match("internal/app") is True
    assert glob.match("internal/app\n") is False


def test_glob_is_a_string():
    assert Glob("a/b") == "a/b"


def test_invalid_glob_raises():
    with pytest.raises(ValueError, match="failed compile glob"):
        Glob("broken(").match("broken")