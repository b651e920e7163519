import errno

import pytest

from tikapi.errors import ApiError, ErrorCode


@pytest.mark.parametrize(
    ("code", "message"),
    [
        (ErrorCode.success, "Success"),
        (ErrorCode.invalid_response, "Invalid response"),
        (ErrorCode.interrupted, "Command execution was interrupted"),
        (ErrorCode.login_failure, "Could not login"),
        (ErrorCode.list_end, "End of list reached"),
        (ErrorCode.unknown_error_category, "Unknoww error category"),
    ],
)
def test_messages(code, message):
    assert code.message() == message


def test_every_code_has_its_own_message():
    messages = {ApiError(code).message for code in ErrorCode}
    assert len(messages) == len(ErrorCode)
    assert "Unknoww error" not in messages


def test_success_is_zero():
    assert ErrorCode.success == 0
    assert ErrorCode.success.condition() == 0


@pytest.mark.parametrize("code", [ErrorCode.invalid_response, ErrorCode.fatal_response])
def test_invalid_conditions(code):
    assert code.condition() == errno.EINVAL


@pytest.mark.parametrize(
    "code", [ErrorCode.no_such_item, ErrorCode.tty_failure, ErrorCode.list_end]
)
def test_other_codes_are_their_own_condition(code):
    assert code.condition() is code


def test_api_error_carries_code_and_message():
    err = ApiError(ErrorCode.no_such_item)
    assert err.code is ErrorCode.no_such_item
    assert str(err) == "No such item"
    assert err.message == "No such item"


def test_api_error_from_int():
    err = ApiError(int(ErrorCode.login_failure))
    assert err.code is ErrorCode.login_failure
    assert str(err) == "Could not login"


def test_api_error_unknown_code():
    err = ApiError(999)
    assert err.code == 999
    assert str(err) == "Unknoww error"


def test_api_error_can_be_raised_and_caught():
    err = ApiError(ErrorCode.item_already_exists)
    assert err.message == "Item already exists"
    with pytest.raises(ApiError, match="Item already exists") as info:
        raise err
    assert info.value is err
    assert info.value.code is ErrorCode.item_already_exists