import warnings

from .display import _repr_table
from .errors import ColumnNameWarning
from .errors import InvalidNumberOfColumnNames
from .errors import InvalidNumberOfColumns
from .errors import InvalidNumberOfElements
from .errors import LayoutWarning
from .errors import StaleViewError
from .errors import TableIndexError
from .errors import TableKeyError
from .layout import Order
from .layout import col_span
from .layout import offset
from .layout import row_span
from .views import AxisView
from .views import Cell


def _missing_col_error(name, context="Table"):
	return TableKeyError(f"Column '{name}' not found in {context}")


def _rows_for(data, num_cols):
	"""Number of rows ``data`` fills with ``num_cols`` columns."""
	if num_cols < 0:
		raise InvalidNumberOfColumns(f"Column count must be non-negative, got {num_cols}")
	if num_cols == 0:
		if data:
			raise InvalidNumberOfColumns(f"Cannot lay out {len(data)} elements in 0 columns")
		return 0
	if len(data) % num_cols != 0:
		raise InvalidNumberOfColumns(
			f"{len(data)} elements do not divide into {num_cols} columns"
		)
	return len(data) // num_cols


class Table:
	""" Homogeneous 2D table backed by a single flat list """
	__slots__ = ('_data', '_col_names', '_descriptions', '_num_cols', '_num_rows', '_order', '_version')

	def __init__(self):
		# Bumped on every shape change; views compare against it
		self._version = 0
		self._reset()

	def _reset(self):
		self._data = []
		self._col_names = []
		self._descriptions = []
		self._num_cols = 0
		self._num_rows = 0
		self._order = Order.default()

	def _touch(self):
		self._version += 1

	# ============================================================
	# Construction
	# ============================================================

	@classmethod
	def new(cls):
		"""Empty 0x0 row-major table."""
		return cls()

	@classmethod
	def _wrap(cls, data, num_cols, num_rows, col_names, order):
		table = cls()
		table._data = data
		table._col_names = col_names
		table._descriptions = [""] * num_cols
		table._num_cols = num_cols
		table._num_rows = num_rows
		table._order = order
		return table

	@classmethod
	def new_sized(cls, num_cols, num_rows, col_names, dtype=int):
		"""
		Table of ``num_cols`` x ``num_rows`` default values.

		Parameters
		----------
		num_cols, num_rows : int
			Shape of the table.
		col_names : iterable of str
			One name per column.
		dtype : callable
			Called with no arguments once per element to produce the default
			value (``int`` gives 0, ``Point`` gives the origin).
		"""
		col_names = list(col_names)
		if len(col_names) != num_cols:
			raise InvalidNumberOfColumnNames(
				f"Expected {num_cols} column names, got {len(col_names)}"
			)
		if num_rows < 0:
			raise InvalidNumberOfElements(f"Row count must be non-negative, got {num_rows}")
		data = [dtype() for _ in range(num_cols * num_rows)]
		return cls._wrap(data, num_cols, num_rows, col_names, Order.default())

	@classmethod
	def from_vec(cls, data, num_cols, col_names):
		"""Wrap a row-major flat buffer. The list is adopted, not copied."""
		if not isinstance(data, list):
			data = list(data)
		col_names = list(col_names)
		num_rows = _rows_for(data, num_cols)
		if len(col_names) != num_cols:
			raise InvalidNumberOfColumnNames(
				f"Expected {num_cols} column names, got {len(col_names)}"
			)
		return cls._wrap(data, num_cols, num_rows, col_names, Order.default())

	@classmethod
	def from_vec_with_order(cls, data, num_cols, col_names, order):
		"""
		Wrap a flat buffer laid out in ``order``.

		Unlike ``from_vec`` the number of column names is not validated: a
		mismatch only emits a ``ColumnNameWarning`` and the names are kept as
		given. Name lookups past the end of a short name list come back absent.
		"""
		if not isinstance(data, list):
			data = list(data)
		col_names = list(col_names)
		num_rows = _rows_for(data, num_cols)
		if len(col_names) != num_cols:
			warnings.warn(
				f"from_vec_with_order got {len(col_names)} column names for {num_cols} columns; "
				"names are not validated here",
				ColumnNameWarning,
				stacklevel=2,
			)
		return cls._wrap(data, num_cols, num_rows, col_names, Order(order))

	def copy(self):
		"""Independent table with the same layout, data and metadata."""
		table = self._wrap(
			list(self._data), self._num_cols, self._num_rows,
			list(self._col_names), self._order,
		)
		table._descriptions = list(self._descriptions)
		return table

	# ============================================================
	# Shape and metadata
	# ============================================================

	@property
	def num_cols(self):
		return self._num_cols

	@property
	def num_rows(self):
		return self._num_rows

	@property
	def order(self):
		return self._order

	@property
	def shape(self):
		"""(num_rows, num_cols)"""
		return (self._num_rows, self._num_cols)

	@property
	def col_names(self):
		return list(self._col_names)

	@property
	def col_descriptions(self):
		return list(self._descriptions)

	def col_index(self, name):
		"""Index of the first column called ``name``, or None."""
		for idx, col_name in enumerate(self._col_names):
			if col_name == name:
				return idx
		return None

	def col_name(self, col):
		if not 0 <= col < self._num_cols or col >= len(self._col_names):
			return None
		return self._col_names[col]

	def col_description(self, col):
		if not 0 <= col < self._num_cols or col >= len(self._descriptions):
			return None
		return self._descriptions[col]

	def set_col_name(self, col, name):
		"""Rename column ``col``; returns the old name or None if out of range."""
		if not 0 <= col < self._num_cols or col >= len(self._col_names):
			return None
		old = self._col_names[col]
		self._col_names[col] = name
		return old

	def set_col_name_by_name(self, name, new_name):
		idx = self.col_index(name)
		if idx is None:
			return None
		return self.set_col_name(idx, new_name)

	def set_col_description(self, col, description):
		if not 0 <= col < self._num_cols or col >= len(self._descriptions):
			return None
		old = self._descriptions[col]
		self._descriptions[col] = description
		return old

	def set_col_description_by_name(self, name, description):
		idx = self.col_index(name)
		if idx is None:
			return None
		return self.set_col_description(idx, description)

	# ============================================================
	# Element access
	# ============================================================

	def _in_bounds(self, row, col):
		return 0 <= row < self._num_rows and 0 <= col < self._num_cols

	def _offset(self, row, col):
		return offset(self._order, self._num_cols, self._num_rows, row, col)

	def get(self, row, col):
		"""Element at (row, col), or None if either index is out of range."""
		if not self._in_bounds(row, col):
			return None
		return self._data[self._offset(row, col)]

	def get_mut(self, row, col):
		"""Writable ``Cell`` for (row, col), or None if out of range."""
		if not self._in_bounds(row, col):
			return None
		return Cell(self, self._offset(row, col))

	def get_unchecked(self, row, col):
		"""
		Element at (row, col) without bounds checking.

		Only for callers that have already checked both indices. Out-of-range
		coordinates may silently address a different cell, or raise a plain
		IndexError from the backing list.
		"""
		return self._data[self._offset(row, col)]

	def get_unchecked_mut(self, row, col):
		"""``get_mut`` without bounds checking; same caveats as ``get_unchecked``."""
		return Cell(self, self._offset(row, col))

	def set(self, row, col, value):
		"""Store ``value`` at (row, col) and return the previous element (None if out of range)."""
		if not self._in_bounds(row, col):
			return None
		idx = self._offset(row, col)
		old = self._data[idx]
		self._data[idx] = value
		return old

	def fill(self, value):
		"""Assign ``value`` to every element."""
		for idx in range(len(self._data)):
			self._data[idx] = value

	# ============================================================
	# Row / column views
	# ============================================================

	def _row_span(self, row):
		return row_span(self._order, self._num_cols, self._num_rows, row)

	def _col_span(self, col):
		return col_span(self._order, self._num_cols, self._num_rows, col)

	def row(self, row):
		"""Read-only view of logical row ``row`` (num_cols elements), or None."""
		if not 0 <= row < self._num_rows:
			return None
		return AxisView(self, self._row_span(row))

	def row_mut(self, row):
		if not 0 <= row < self._num_rows:
			return None
		return AxisView(self, self._row_span(row), writable=True)

	def col(self, col):
		"""Read-only view of logical column ``col`` (num_rows elements), or None."""
		if not 0 <= col < self._num_cols:
			return None
		return AxisView(self, self._col_span(col))

	def col_mut(self, col):
		if not 0 <= col < self._num_cols:
			return None
		return AxisView(self, self._col_span(col), writable=True)

	def col_by_name(self, name):
		idx = self.col_index(name)
		if idx is None:
			return None
		return self.col(idx)

	def col_by_name_mut(self, name):
		idx = self.col_index(name)
		if idx is None:
			return None
		return self.col_mut(idx)

	def rows(self):
		"""Read-only views of every logical row."""
		return [self.row(r) for r in range(self._num_rows)]

	def cols(self):
		"""Read-only views of every logical column."""
		return [self.col(c) for c in range(self._num_cols)]

	# ============================================================
	# Iteration
	# ============================================================

	def __iter__(self):
		"""Elements in physical buffer order."""
		return iter(self._data)

	def iter(self):
		return iter(self._data)

	def _cells(self, offsets):
		"""Lazily yield a Cell per offset; stops with StaleViewError if the shape changes."""
		version = self._version
		for idx in offsets:
			if self._version != version:
				raise StaleViewError("Table changed shape during iteration")
			yield Cell(self, idx)

	def iter_mut(self):
		"""``Cell`` handles for every element, in physical buffer order."""
		return self._cells(range(len(self._data)))

	def iter_row(self, row):
		view = self.row(row)
		return None if view is None else iter(view)

	def iter_row_mut(self, row):
		if not 0 <= row < self._num_rows:
			return None
		return self._cells(range(len(self._data))[self._row_span(row)])

	def iter_col(self, col):
		view = self.col(col)
		return None if view is None else iter(view)

	def iter_col_mut(self, col):
		if not 0 <= col < self._num_cols:
			return None
		return self._cells(range(len(self._data))[self._col_span(col)])

	def iter_col_by_name(self, name):
		idx = self.col_index(name)
		if idx is None:
			return None
		return self.iter_col(idx)

	def iter_col_by_name_mut(self, name):
		idx = self.col_index(name)
		if idx is None:
			return None
		return self.iter_col_mut(idx)

	# ============================================================
	# Whole row / column replacement
	# ============================================================

	def set_col(self, col, values):
		"""
		Replace column ``col`` with ``values``.

		Returns the previous contents as a list, or None (table untouched) if
		``col`` is out of range or ``values`` does not have num_rows elements.
		"""
		values = list(values)
		if not 0 <= col < self._num_cols or len(values) != self._num_rows:
			return None
		span = self._col_span(col)
		old = self._data[span]
		self._data[span] = values
		return old

	def set_row(self, row, values):
		"""Replace row ``row``; same contract as ``set_col`` with num_cols elements."""
		values = list(values)
		if not 0 <= row < self._num_rows or len(values) != self._num_cols:
			return None
		span = self._row_span(row)
		old = self._data[span]
		self._data[span] = values
		return old

	def set_col_by_name(self, name, values):
		idx = self.col_index(name)
		if idx is None:
			return None
		return self.set_col(idx, values)

	# ============================================================
	# Structural mutation
	# ============================================================

	def push_col(self, name, col_data):
		"""
		Append a column of num_rows elements.

		The values always go to the end of the buffer, which only lines up
		with a new column in column-major layout, a single row, or a
		table with no columns yet.
		Otherwise a ``LayoutWarning`` is emitted and the append happens
		anyway.
		"""
		col_data = list(col_data)
		if len(col_data) != self._num_rows:
			raise InvalidNumberOfElements(
				f"Column '{name}' has {len(col_data)} elements, table has {self._num_rows} rows"
			)
		if self._order is Order.ROW_MAJOR and self._num_rows > 1 and self._num_cols > 0:
			warnings.warn(
				"push_col appends at the buffer tail; on a row-major table this "
				"scrambles the existing rows. Transpose first or use column-major.",
				LayoutWarning,
				stacklevel=2,
			)
		self._col_names.append(name)
		self._descriptions.append("")
		self._data.extend(col_data)
		self._num_cols += 1
		self._touch()

	def push_row(self, row_data):
		"""Append a row of num_cols elements at the end of the buffer (see ``push_col``)."""
		row_data = list(row_data)
		if len(row_data) != self._num_cols:
			raise InvalidNumberOfElements(
				f"Row has {len(row_data)} elements, table has {self._num_cols} columns"
			)
		if self._order is Order.COLUMN_MAJOR and self._num_cols > 1 and self._num_rows > 0:
			warnings.warn(
				"push_row appends at the buffer tail; on a column-major table this "
				"scrambles the existing columns. Transpose first or use row-major.",
				LayoutWarning,
				stacklevel=2,
			)
		self._data.extend(row_data)
		self._num_rows += 1
		self._touch()

	def remove_col(self, col):
		"""Remove column ``col`` with its name and description; returns its elements or None."""
		if not 0 <= col < self._num_cols:
			return None
		span = self._col_span(col)
		removed = self._data[span]
		# metadata can be shorter than num_cols after a transpose
		if col < len(self._col_names):
			del self._col_names[col]
		if col < len(self._descriptions):
			del self._descriptions[col]
		del self._data[span]
		self._num_cols -= 1
		self._touch()
		return removed

	def remove_row(self, row):
		"""Remove row ``row``; returns its elements or None."""
		if not 0 <= row < self._num_rows:
			return None
		span = self._row_span(row)
		removed = self._data[span]
		del self._data[span]
		self._num_rows -= 1
		self._touch()
		return removed

	def transpose(self):
		"""
		Swap rows and columns in O(1) by reinterpreting the buffer.

		The data is not moved: the layout flips and the counts swap. Column
		names and descriptions are left alone, so after transposing they
		label what are now rows. Returns self for chaining.
		"""
		self._order = self._order.swap()
		self._num_cols, self._num_rows = self._num_rows, self._num_cols
		self._touch()
		return self

	@property
	def T(self):
		"""Transposed copy; the original table is unchanged."""
		return self.copy().transpose()

	def into_vec(self):
		"""Hand the backing list to the caller and leave this table empty."""
		data = self._data
		self._reset()
		self._touch()
		return data

	def into_vec_with_names(self):
		data, names = self._data, self._col_names
		self._reset()
		self._touch()
		return data, names

	# ============================================================
	# Python protocol
	# ============================================================

	def __len__(self):
		return len(self._data)

	def _resolve(self, index, size, axis):
		if isinstance(index, bool) or not isinstance(index, int):
			raise TypeError(f"{axis} index must be int, not {type(index).__name__}")
		resolved = index + size if index < 0 else index
		if not 0 <= resolved < size:
			raise TableIndexError(f"{axis} index {index} out of range for {size} {axis.lower()}s")
		return resolved

	def __getitem__(self, key):
		if isinstance(key, tuple):
			if len(key) != 2:
				raise TypeError("Table indices must be (row, col) pairs")
			row, col = key
			if isinstance(col, str):
				idx = self.col_index(col)
				if idx is None or idx >= self._num_cols:
					raise _missing_col_error(col)
				col = idx
			row = self._resolve(row, self._num_rows, "Row")
			col = self._resolve(col, self._num_cols, "Column")
			return self._data[self._offset(row, col)]
		if isinstance(key, str):
			view = self.col_by_name(key)
			if view is None:
				raise _missing_col_error(key)
			return view
		return self.row(self._resolve(key, self._num_rows, "Row"))

	def __setitem__(self, key, value):
		if isinstance(key, str):
			idx = self.col_index(key)
			if idx is None or idx >= self._num_cols:
				raise _missing_col_error(key)
			if self.set_col(idx, value) is None:
				raise InvalidNumberOfElements(
					f"Column '{key}' needs {self._num_rows} elements"
				)
			return
		if not isinstance(key, tuple) or len(key) != 2:
			raise TypeError("Table assignment needs a (row, col) pair or a column name")
		row, col = key
		if isinstance(col, str):
			idx = self.col_index(col)
			if idx is None or idx >= self._num_cols:
				raise _missing_col_error(col)
			col = idx
		row = self._resolve(row, self._num_rows, "Row")
		col = self._resolve(col, self._num_cols, "Column")
		self._data[self._offset(row, col)] = value

	def __eq__(self, other):
		if not isinstance(other, Table):
			return NotImplemented
		return (
			self._order is other._order
			and self._num_cols == other._num_cols
			and self._num_rows == other._num_rows
			and self._col_names == other._col_names
			and self._descriptions == other._descriptions
			and self._data == other._data
		)

	__hash__ = None

	def __repr__(self):
		return _repr_table(self)
