from __future__ import annotations


class RelayError(Exception):
    """Base error for every failure an entry point can return to the host.

    ``code`` is the integer return code surfaced to the host, or None when the
    error carries only its message.
    """

    code: int | None = None

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ConfigError(RelayError):
    code = 1


class InputError(RelayError):
    code = 1


class NoCompletionError(RelayError):
    code = 1


class NoToolCallsError(RelayError):
    code = 1


class DecodeError(RelayError):
    pass


class TransportError(RelayError):
    pass


class ApiError(RelayError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            f"error calling API\nStatus Code: {status_code}\n Response: {body}"
        )
        self.status_code = status_code
        self.body = body
