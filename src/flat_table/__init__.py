"""
flat-table: a homogeneous 2D table stored in one flat buffer

Elements live in a single list addressed either row-major or column-major.
Row and column views, named and described columns, and O(1) in-place
transposition all go through the same offset arithmetic.

Main classes:
    - Table: the flat-buffer table
    - Order: ROW_MAJOR / COLUMN_MAJOR layout tag
    - AxisView, Cell: views and element handles returned by Table accessors
    - Point: 3D vector, usable as an element type

Zero external dependencies - pure Python stdlib only.
"""

from .layout import Order
from .table import Table
from .views import AxisView, Cell
from .point import Point
from .errors import (
	TableError,
	InvalidNumberOfColumns,
	InvalidNumberOfColumnNames,
	InvalidNumberOfElements,
	TableIndexError,
	TableKeyError,
	StaleViewError,
	LayoutWarning,
	ColumnNameWarning,
)

__version__ = "0.1.0"
__all__ = [
	"Table",
	"Order",
	"AxisView",
	"Cell",
	"Point",
	"TableError",
	"InvalidNumberOfColumns",
	"InvalidNumberOfColumnNames",
	"InvalidNumberOfElements",
	"TableIndexError",
	"TableKeyError",
	"StaleViewError",
	"LayoutWarning",
	"ColumnNameWarning",
]
