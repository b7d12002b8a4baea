class RecordStoreError(Exception):
    """Base exception for all tree record store errors."""


class RecordNotFoundError(RecordStoreError):
    """Raised when no tree document exists at the requested identifier."""


class StoreUnavailableError(RecordStoreError):
    """Raised when the store cannot be reached or its document cannot be read."""
