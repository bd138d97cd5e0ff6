"""Exceptions raised by the document store and the service layer."""


class StoreError(Exception):
    """Base class for every store/service failure."""


class StorageReadError(StoreError):
    """The backing file could not be read or did not hold a valid JSON array of records."""


class StorageWriteError(StoreError):
    """The backing file could not be written."""


class NotFoundError(StoreError):
    """An id did not resolve to a record."""

    def __init__(self, message: str, record_id: str):
        super().__init__(message)
        self.record_id = record_id


class ExpenseNotFoundError(NotFoundError):
    def __init__(self, expense_id: str):
        super().__init__("Expense not found", expense_id)


class GroupNotFoundError(NotFoundError):
    def __init__(self, group_id: str):
        super().__init__("Group not found", group_id)


class ItemNotFoundError(NotFoundError):
    def __init__(self, group_id: str, item_id: str):
        super().__init__("Sub-item not found", item_id)
        self.group_id = group_id
