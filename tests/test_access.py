"""Layout-aware element and axis access"""
import pytest
from flat_table import Table, Order


NAMES = ["a", "b", "c"]


def row_major():
    # rows [1, 2, 3], [4, 5, 6]
    return Table.from_vec([1, 2, 3, 4, 5, 6], 3, list(NAMES))


def column_major():
    # cols [1, 2], [3, 4], [5, 6]
    return Table.from_vec_with_order([1, 2, 3, 4, 5, 6], 3, list(NAMES), Order.COLUMN_MAJOR)


class TestGet:

    @pytest.mark.parametrize("row,col,expected", [
        (0, 0, 1), (0, 2, 3), (1, 0, 4), (1, 2, 6),
    ])
    def test_row_major(self, row, col, expected):
        assert row_major().get(row, col) == expected

    @pytest.mark.parametrize("row,col,expected", [
        (0, 0, 1), (1, 0, 2), (0, 2, 5), (1, 2, 6),
    ])
    def test_column_major(self, row, col, expected):
        assert column_major().get(row, col) == expected

    @pytest.mark.parametrize("row,col", [(2, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
    def test_out_of_range_is_absent(self, row, col):
        assert row_major().get(row, col) is None
        assert column_major().get(row, col) is None
        assert row_major().get_mut(row, col) is None

    def test_unchecked_matches_checked(self):
        for t in (row_major(), column_major()):
            for r in range(t.num_rows):
                for c in range(t.num_cols):
                    assert t.get_unchecked(r, c) == t.get(r, c)
                    assert t.get_unchecked_mut(r, c).value == t.get(r, c)

    def test_unchecked_does_not_bounds_check(self):
        t = row_major()
        # (0, 3) lands on the first cell of row 1
        assert t.get_unchecked(0, 3) == t.get(1, 0)
        with pytest.raises(IndexError):
            t.get_unchecked(5, 5)


class TestSet:

    @pytest.mark.parametrize("make", [row_major, column_major])
    def test_set_then_get(self, make):
        t = make()
        for r in range(t.num_rows):
            for c in range(t.num_cols):
                before = t.get(r, c)
                value = 100 + r * 10 + c
                assert t.set(r, c, value) == before
                assert t.get(r, c) == value

    def test_out_of_range_is_absent(self):
        t = row_major()
        assert t.set(2, 0, 99) is None
        assert t.set(0, -1, 99) is None
        assert list(t) == [1, 2, 3, 4, 5, 6]

    def test_fill(self):
        t = column_major()
        t.fill(7)
        assert list(t) == [7] * 6


class TestRowsAndColumns:

    def test_row_major_rows_are_contiguous(self):
        t = row_major()
        assert t.row(0).tolist() == [1, 2, 3]
        assert t.row(1).tolist() == [4, 5, 6]
        assert t.row(0).contiguous

    def test_row_major_columns_are_strided(self):
        t = row_major()
        assert list(t.col(0).offsets) == [0, 3]
        assert t.col(0).tolist() == [1, 4]
        assert t.col(2).tolist() == [3, 6]
        assert not t.col(0).contiguous

    def test_column_major_columns_are_contiguous(self):
        t = column_major()
        assert t.col(1).tolist() == [3, 4]
        assert t.col(1).contiguous

    def test_column_major_rows_are_strided(self):
        t = column_major()
        assert t.row(0).tolist() == [1, 3, 5]
        assert t.row(1).tolist() == [2, 4, 6]
        assert list(t.row(1).offsets) == [1, 3, 5]

    @pytest.mark.parametrize("make", [row_major, column_major])
    def test_views_agree_with_get(self, make):
        t = make()
        for r in range(t.num_rows):
            assert t.row(r).tolist() == [t.get(r, c) for c in range(t.num_cols)]
        for c in range(t.num_cols):
            assert t.col(c).tolist() == [t.get(r, c) for r in range(t.num_rows)]

    def test_out_of_range(self):
        t = row_major()
        assert t.row(2) is None
        assert t.row(-1) is None
        assert t.col(3) is None
        assert t.row_mut(2) is None
        assert t.col_mut(3) is None

    def test_rows_and_cols_lists(self):
        t = row_major()
        assert [r.tolist() for r in t.rows()] == [[1, 2, 3], [4, 5, 6]]
        assert [c.tolist() for c in t.cols()] == [[1, 4], [2, 5], [3, 6]]


class TestByName:

    @pytest.mark.parametrize("make", [row_major, column_major])
    def test_matches_index(self, make):
        t = make()
        for idx, name in enumerate(NAMES):
            assert t.col_by_name(name) == t.col(idx)

    def test_missing(self):
        assert row_major().col_by_name("missing") is None
        assert row_major().col_by_name_mut("missing") is None
        assert Table().col_by_name("missing") is None

    def test_first_match_wins(self):
        t = Table.from_vec([1, 2, 3], 3, ["a", "a", "b"])
        assert t.col_index("a") == 0
        assert t.col_by_name("a").tolist() == [1]

    def test_col_index(self):
        t = row_major()
        assert t.col_index("c") == 2
        assert t.col_index("z") is None


class TestIteration:

    def test_physical_order_row_major(self):
        assert list(row_major().iter()) == [1, 2, 3, 4, 5, 6]

    def test_physical_order_column_major(self):
        # physical, not logical row order
        assert list(column_major()) == [1, 2, 3, 4, 5, 6]

    def test_reiterable(self):
        t = row_major()
        assert list(t) == list(t)

    def test_iter_row_and_col(self):
        t = column_major()
        assert list(t.iter_row(0)) == [1, 3, 5]
        assert list(t.iter_col(2)) == [5, 6]
        assert list(t.iter_col_by_name("b")) == [3, 4]

    def test_iter_absent(self):
        t = row_major()
        assert t.iter_row(9) is None
        assert t.iter_col(9) is None
        assert t.iter_row_mut(9) is None
        assert t.iter_col_mut(9) is None
        assert t.iter_col_by_name("missing") is None
        assert t.iter_col_by_name_mut("missing") is None

    def test_iter_mut_writes_through(self):
        t = row_major()
        for cell in t.iter_mut():
            cell.value *= 10
        assert list(t) == [10, 20, 30, 40, 50, 60]

    def test_iter_row_mut_column_major(self):
        t = column_major()
        cells = list(t.iter_row_mut(1))
        assert [c.value for c in cells] == [2, 4, 6]
        for cell in cells:
            cell.value = 0
        assert list(t) == [1, 0, 3, 0, 5, 0]

    def test_iter_col_by_name_mut(self):
        t = row_major()
        for cell in t.iter_col_by_name_mut("b"):
            cell.value = -cell.value
        assert t.col(1).tolist() == [-2, -5]
