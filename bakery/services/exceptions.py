"""Errors raised by the feasibility and costing services."""


class BakeryServiceError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataUnavailable(BakeryServiceError):
    """The persistence layer could not supply the snapshot."""

    status_code = 500


class RecipeNotFound(BakeryServiceError):
    """The requested recipe does not exist for this client."""

    status_code = 404
