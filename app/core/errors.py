"""Errors raised by the record store and surfaced to callers verbatim."""


class RecordStoreError(Exception):
    """Base class for record store errors."""

    def __init__(self, record_id: str, message: str):
        super().__init__(message)
        self.record_id = record_id


class DuplicateIdError(RecordStoreError):
    """A record with the same id is already stored."""

    def __init__(self, record_id: str):
        super().__init__(record_id, f"record {record_id!r} already exists")


class RecordNotFoundError(RecordStoreError):
    """No record is stored under the requested id."""

    def __init__(self, record_id: str):
        super().__init__(record_id, f"record {record_id!r} not found")
