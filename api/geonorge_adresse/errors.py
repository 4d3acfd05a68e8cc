from typing import Literal

ErrorOrigin = Literal["transport", "response", "service"]


class InvalidArgumentError(ValueError):
    """Raised before any request is made when the caller's input is unusable."""


class ServiceError(Exception):
    """The address service could not be reached or did not answer usefully.

    ``origin`` tells where it went wrong: ``"transport"`` for connection and
    HTTP status failures, ``"response"`` for bodies that are not a valid
    envelope, ``"service"`` when the service itself reported ``ok=false``.
    """

    def __init__(self, message: str, origin: ErrorOrigin = "service"):
        super().__init__(message)
        self.message = message
        self.origin = origin
