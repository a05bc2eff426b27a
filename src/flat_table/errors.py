class TableError(Exception):
    """Base exception for flat-table."""
    pass


class InvalidNumberOfColumns(TableError, ValueError):
    """Raised when the buffer length is not a multiple of the column count."""
    pass


class InvalidNumberOfColumnNames(TableError, ValueError):
    """Raised when the number of column names differs from the column count."""
    pass


class InvalidNumberOfElements(TableError, ValueError):
    """Raised when an inserted row or column has the wrong length."""
    pass


class TableIndexError(TableError, IndexError):
    """Raised for out-of-range subscripts."""
    pass


class TableKeyError(TableError, KeyError):
    """Raised when a column name is missing."""
    pass


class StaleViewError(TableError):
    """Raised when a view or cell is used after its table changed shape."""
    pass


class LayoutWarning(UserWarning):
    """Tail-append that does not follow the active layout's append axis."""
    pass


class ColumnNameWarning(UserWarning):
    """Column name count does not match the column count."""
    pass
