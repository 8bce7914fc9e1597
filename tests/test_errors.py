import pytest

from archlint.errors import ReferableError, UserSpaceError
from archlint.reference import single_line_reference


def test_user_space_error_message_and_payload():
    payload = {"ModuleName": "demo"}
    err = UserSpaceError("check not successful", payload)
    assert str(err) == "check not successful"
    assert err.message == "check not successful"
    assert err.payload is payload


def test_user_space_error_default_payload():
    assert UserSpaceError("boom").payload is None


def test_user_space_error_is_raised_and_caught():
    err = UserSpaceError("failed", 5)
    with pytest.raises(UserSpaceError, match="failed") as info:
        raise err
    assert info.value is err
    assert info.value.payload == 5
    assert info.value.message == "failed"


def test_referable_error_delegates_message():
    original = ValueError("bad value")
    ref = single_line_reference("arch.yml", 4, 2)
    err = ReferableError(original, ref)
    assert str(err) == "bad value"
    assert err.original is original
    assert err.reference == ref


def test_referable_error_is_not_user_space_error():
    ref = single_line_reference("f", 1, 0)
    err = ReferableError(ValueError("x"), ref)
    assert str(err) == "x"
    assert err.reference == ref
    assert not isinstance(err, UserSpaceError)