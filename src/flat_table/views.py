"""Views into a table's flat buffer.

An ``AxisView`` covers one logical row or column (or the whole buffer) as a
``range`` of physical offsets, so it reads through to the live list without
copying. A ``Cell`` does the same for a single offset.

Both remember the table's structural version at creation. Pushing,
removing, transposing or releasing the buffer bumps that version, after
which the old offsets no longer mean what they did and any use of the view
raises ``StaleViewError``. Plain value writes keep views valid.
"""

from __future__ import annotations
from .errors import StaleViewError, TableIndexError


def _stale_error(kind):
	return StaleViewError(
		f"This {kind} was taken before the table changed shape.\n"
		"Take a new one from the table."
	)


class AxisView:
	"""Row, column or buffer view resolved through the table's layout."""
	__slots__ = ('_table', '_offsets', '_version', '_writable')

	def __init__(self, table, span, writable=False):
		self._table = table
		self._offsets = range(len(table._data))[span]
		self._version = table._version
		self._writable = writable

	def _live_data(self):
		if self._table._version != self._version:
			raise _stale_error("view")
		return self._table._data

	@property
	def writable(self):
		return self._writable

	@property
	def contiguous(self):
		"""True when the elements sit next to each other in the buffer."""
		return self._offsets.step == 1 or len(self._offsets) <= 1

	@property
	def offsets(self):
		"""Physical offsets covered by this view, in logical order."""
		return self._offsets

	def __len__(self):
		return len(self._offsets)

	def __getitem__(self, key):
		data = self._live_data()
		if isinstance(key, slice):
			return [data[i] for i in self._offsets[key]]
		try:
			return data[self._offsets[key]]
		except IndexError:
			raise TableIndexError(f"View index {key} out of range for length {len(self)}") from None

	def __setitem__(self, key, value):
		if not self._writable:
			raise TypeError("Read-only view; use row_mut()/col_mut() for a writable one")
		data = self._live_data()
		if isinstance(key, slice):
			targets = self._offsets[key]
			values = list(value)
			if len(values) != len(targets):
				raise ValueError(
					f"Cannot assign {len(values)} values to a slice of length {len(targets)}"
				)
			for i, v in zip(targets, values):
				data[i] = v
			return
		try:
			data[self._offsets[key]] = value
		except IndexError:
			raise TableIndexError(f"View index {key} out of range for length {len(self)}") from None

	def __iter__(self):
		for i in self._offsets:
			# re-checked per step so a shape change mid-loop is caught
			yield self._live_data()[i]

	def __eq__(self, other):
		if isinstance(other, AxisView):
			other = other.tolist()
		try:
			return self.tolist() == list(other)
		except TypeError:
			return NotImplemented

	__hash__ = None

	def tolist(self):
		"""Copy the viewed elements into a new list."""
		data = self._live_data()
		return [data[i] for i in self._offsets]

	def fill(self, value):
		"""Assign ``value`` to every viewed element."""
		if not self._writable:
			raise TypeError("Read-only view; use row_mut()/col_mut() for a writable one")
		data = self._live_data()
		for i in self._offsets:
			data[i] = value

	def __repr__(self):
		mode = "mut" if self._writable else "ro"
		return f"AxisView[{mode}]({self.tolist()!r})"


class Cell:
	"""Writable handle to one element of a table."""
	__slots__ = ('_table', '_offset', '_version')

	def __init__(self, table, offset):
		self._table = table
		self._offset = offset
		self._version = table._version

	def _live_data(self):
		if self._table._version != self._version:
			raise _stale_error("cell")
		return self._table._data

	@property
	def offset(self):
		return self._offset

	@property
	def value(self):
		return self._live_data()[self._offset]

	@value.setter
	def value(self, new_value):
		self._live_data()[self._offset] = new_value

	def replace(self, new_value):
		"""Store ``new_value`` and return the previous one."""
		data = self._live_data()
		old = data[self._offset]
		data[self._offset] = new_value
		return old

	def __repr__(self):
		return f"Cell({self._offset}: {self.value!r})"
