"""Domain error taxonomy."""


class DataUnavailableError(RuntimeError):
    """Raised when the record store cannot be read.

    The dashboard never raises this itself; it is raised by store
    adapters and propagates to the caller unmodified.
    """


class RecordNotFoundError(LookupError):
    """Raised when a record id does not exist in the store."""

    def __init__(self, record_type: str, record_id: str) -> None:
        super().__init__(f"{record_type} not found: {record_id}")
        self.record_type = record_type
        self.record_id = record_id


class RecordValidationError(ValueError):
    """Raised when a record is rejected on the write path."""


__all__ = [
    "DataUnavailableError",
    "RecordNotFoundError",
    "RecordValidationError",
]
