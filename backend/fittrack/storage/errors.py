class StorageError(Exception):
    """Base class for failures raised by a Storage implementation."""


class StoreUnavailable(StorageError):
    """The backing medium could not complete the operation.

    Raised for connection loss and other engine failures. The storage layer
    does not retry; that decision belongs to the caller.
    """


class IntegrityViolation(StorageError):
    """A write broke a store-enforced rule: unknown user_id or duplicate username."""
