"""Display and repr logic for Table."""

from __future__ import annotations
from typing import List


# How many rows/columns to show before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5


def _needs_quoting(name: str) -> bool:
	"""A name needs quoting if it contains anything outside [A-Za-z0-9_]
	OR has leading/trailing whitespace."""
	if not name:
		return False
	if name != name.strip():
		return True
	return not all(c.isalnum() or c == "_" for c in name)


def _preview_indices(n: int, limit: int) -> List[int | None]:
	"""Head and tail indices with None marking the elided middle."""
	if n > limit * 2:
		return list(range(limit)) + [None] + list(range(n - limit, n))
	return list(range(n))


def _is_number(v) -> bool:
	return isinstance(v, (int, float)) and not isinstance(v, bool)


def _format_value(v) -> str:
	if isinstance(v, float):
		return f"{v:.1f}" if v.is_integer() else f"{v:g}"
	if isinstance(v, str):
		return repr(v)
	return str(v)


def _format_column(tbl, col, row_indices) -> tuple[str, List[str], bool]:
	"""Header, cell strings and numeric flag for one displayed column."""
	if col is None:
		return "...", ["..." for _ in row_indices], False

	name = tbl.col_name(col)
	if name is None:
		name = ""
	header = repr(name) if _needs_quoting(name) else name

	values = [tbl.get_unchecked(r, col) for r in row_indices if r is not None]
	numeric = bool(values) and all(_is_number(v) for v in values)

	cells = []
	for r in row_indices:
		if r is None:
			cells.append("...")
		else:
			cells.append(_format_value(tbl.get_unchecked(r, col)))
	return header, cells, numeric


def _footer(tbl) -> str:
	rows, cols = tbl.shape
	return f"# {rows}×{cols} table <{tbl.order}>"


def _repr_table(tbl) -> str:
	"""Pretty repr for a Table."""
	rows, cols = tbl.shape
	if rows == 0 and cols == 0:
		return "# 0×0 table"
	if cols == 0:
		return _footer(tbl)

	row_indices = _preview_indices(rows, MAX_HEAD_ROWS)
	col_indices = _preview_indices(cols, MAX_HEAD_COLS)

	headers = []
	columns = []
	for c in col_indices:
		header, cells, numeric = _format_column(tbl, c, row_indices)
		width = max([len(header)] + [len(s) for s in cells])
		# Align: numeric right, others left
		pad = str.rjust if numeric else str.ljust
		headers.append(pad(header, width))
		columns.append([pad(s, width) for s in cells])

	lines = []
	if any(tbl.col_name(c) for c in col_indices if c is not None):
		lines.append("  ".join(headers).rstrip())
	for r in range(len(row_indices)):
		lines.append("  ".join(col[r] for col in columns).rstrip())

	lines.append("")
	lines.append(_footer(tbl))
	return "\n".join(lines)
