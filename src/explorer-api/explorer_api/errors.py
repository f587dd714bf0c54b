from typing import Any, Optional


class ExplorerError(Exception):
    """Base class for every error raised by the explorer clients."""


class ValidationError(ExplorerError, ValueError):
    """Arguments rejected before any request is sent."""


class TransportError(ExplorerError):
    """The HTTP call failed or came back with a non-success status."""

    def __init__(self, reason: str, status_code: Optional[int] = None) -> None:
        self.reason = reason
        self.status_code = status_code
        if status_code is None:
            text = f"Failed to reach explorer: {reason}."
        else:
            text = f"Failed to fetch from explorer: HTTP {status_code} {reason}."
        super().__init__(text)


class DecodeError(ExplorerError):
    """The response body is not a JSON object."""


class ServiceError(ExplorerError):
    """
    The explorer answered, but its status envelope reports a failure.

    Some endpoints put the human-readable detail in ``message`` and some in
    ``result``, so both are kept.
    """

    def __init__(self, message: str, result: Any = None, status: Any = None) -> None:
        self.message = message
        self.result = result
        self.status = status
        detail = message or "unknown error"
        if isinstance(result, str) and result and result != message:
            detail = f"{detail} ({result})"
        super().__init__(f"Error from explorer: {detail}.")
