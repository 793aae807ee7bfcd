"""Exceptions raised at the edges of the grocery list pipeline.

Parsing list content never raises; these cover reading input, reading
serialized lists back, and replaying records into the form.
"""


class GroceryListError(Exception):
    """Base class for grocery list errors."""


class ListReadError(GroceryListError):
    """The list source could not be read."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Cannot read {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CsvFormatError(GroceryListError):
    """A serialized list has a bad header or row."""

    def __init__(self, message: str, row: int | None = None):
        self.row = row
        if row is not None:
            message = f"Row {row}: {message}"
        super().__init__(message)


class EmptyListError(GroceryListError):
    """There are no items to work with."""


class FormServerUnavailable(GroceryListError):
    """The form server did not answer its health check."""

    def __init__(self, base_url: str):
        self.base_url = base_url
        super().__init__(f"Form server is not running on {base_url}")
