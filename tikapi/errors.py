"""Error codes reported by the API client and the exception that carries them."""

from __future__ import annotations

import errno
import enum

_MESSAGES = {
    "success": "Success",
    "invalid_response": "Invalid response",
    "untagged_response": "Untagged response",
    "unknown_response_type": "Unknown response type",
    "fatal_response": "Fatal response",
    "no_such_item": "No such item",
    "invalid_argument": "Invalid argument",
    "interrupted": "Command execution was interrupted",
    "script_failure": "Script related failure",
    "general_failure": "General failure",
    "api_failure": "API related failure",
    "tty_failure": "TTY related failure",
    "unknown_parameter": "Unknown parameter",
    "login_failure": "Could not login",
    "item_already_exists": "Item already exists",
    "list_end": "End of list reached",
    "unknown_error_category": "Unknoww error category",
}

_UNKNOWN_MESSAGE = "Unknoww error"


class ErrorCode(enum.IntEnum):
    """Error codes of the API client."""

    success = 0
    invalid_response = enum.auto()
    untagged_response = enum.auto()
    unknown_response_type = enum.auto()
    fatal_response = enum.auto()
    no_such_item = enum.auto()
    invalid_argument = enum.auto()
    interrupted = enum.auto()
    script_failure = enum.auto()
    general_failure = enum.auto()
    api_failure = enum.auto()
    tty_failure = enum.auto()
    unknown_parameter = enum.auto()
    login_failure = enum.auto()
    item_already_exists = enum.auto()
    list_end = enum.auto()
    unknown_error_category = enum.auto()

    def message(self) -> str:
        """Return the human readable description of the code."""
        return _MESSAGES.get(self.name, _UNKNOWN_MESSAGE)

    def condition(self) -> int:
        """Return the generic condition the code maps to.

        Success maps to ``0``, malformed and fatal responses to ``errno.EINVAL``;
        every other code is its own condition.
        """
        if self is ErrorCode.success:
            return 0
        if self in (ErrorCode.invalid_response, ErrorCode.fatal_response):
            return errno.EINVAL
        return self


class ApiError(Exception):
    """Raised when the router or the client reports an error code."""

    def __init__(self, code: ErrorCode | int) -> None:
        try:
            code = ErrorCode(code)
        except ValueError:
            message = _UNKNOWN_MESSAGE
        else:
            message = code.message()
        super().__init__(message)
        self.code = code
        self.message = message