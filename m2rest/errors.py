"""Exceptions raised by the Magento 2 REST client."""


class MagentoClientError(Exception):
    """Base exception for Magento API errors."""

    def __init__(self, message: str, operation: str | None = None):
        self.operation = operation
        if operation:
            message = f"error while trying to {operation}: {message}"
        super().__init__(message)


class NotFound(MagentoClientError):
    """Remote resource does not exist (HTTP 404 or an empty search)."""

    def __init__(self, message: str = "resource not found", operation: str | None = None):
        super().__init__(message, operation)


class BadRequest(MagentoClientError):
    """Magento answered with an error status other than 404.

    Raised after the retry budget for 500/503 is spent, so ``status_code`` and
    ``body`` always describe the last response received.
    """

    def __init__(self, status_code: int, body: str, operation: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"bad request (status {status_code}, response: {body})", operation)


class InvalidUsage(MagentoClientError, TypeError):
    """Programmer error, e.g. decoding into an instance instead of a type."""


class ItemNotFound(NotFound):
    """A cart item could not be added because its SKU does not resolve."""

    def __init__(self, item_id: int | None = None, sku: str | None = None, operation: str | None = None):
        self.item_id = item_id
        self.sku = sku
        super().__init__(f"cart item not found (item_id={item_id}, sku={sku!r})", operation)


class RequestCancelled(MagentoClientError):
    """The caller cancelled the call. Never retried."""

    def __init__(self, message: str = "request cancelled", operation: str | None = None):
        super().__init__(message, operation)


class TransportError(MagentoClientError):
    """Network-level failure talking to Magento."""


class RequestTimeout(TransportError):
    """The request did not complete within its timeout."""
