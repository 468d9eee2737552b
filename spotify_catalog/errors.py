class CatalogError(Exception):
    """Base for every failure a fetch can report."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(CatalogError):
    """Raised when the request never produced a response (connect, read, timeout)."""


class StatusError(CatalogError):
    """Raised when the API answered with a non-success status code."""

    def __init__(self, message: str, url: str, status_code: int) -> None:
        super().__init__(message, url)
        self.status_code = status_code


class PayloadError(CatalogError):
    """Raised when a success response body is not valid JSON."""


class ShapeError(CatalogError):
    """Raised when the JSON body does not match the expected model."""
