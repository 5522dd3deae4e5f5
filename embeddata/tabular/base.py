# ==============================
# Tabular Data (columnar store)
# ==============================
"""
Base container for every normalized payload.

Data is stored by column, keyed by the column name, so any subset of columns
can be read back in any order. Column names are resolved case-insensitively
(ASCII lowercasing only) to the one canonical name stored here.

Lifecycle:
- set the column names
- populate once, either by row or by column
- read through the accessors; nothing is appended afterwards

The payload the data came from is kept as `original_data` by reference. It is
never modified, and column values are copied at population time, so later
changes to the payload do not leak into the table.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from embeddata.logging.logger import get_logger

logger = get_logger("tabular")

Cell = Any
Column = List[Cell]
Row = List[Cell]


# ==============================
# Helpers
# ==============================


def zip_columns(arrays: Sequence[Sequence[Cell]]) -> List[Row]:
    """
    Combine and invert arrays, so a = [1, 2, 3], b = [4, 5, 6] becomes
    [[1, 4], [2, 5], [3, 6]].

    The number of rows is the length of the FIRST array. A later array that is
    shorter yields None past its end; an empty first array yields no rows at all.
    """
    if not arrays:
        return []
    return [
        [array[i] if i < len(array) else None for array in arrays]
        for i in range(len(arrays[0]))
    ]


def sort_objects(items: List[Dict[str, Any]], attr: str) -> None:
    """Sort a list of dicts in place, ascending on one key."""
    items.sort(key=lambda item: item[attr])


def _fold(name: str) -> str:
    # ASCII-only case folding; non-ASCII letters are compared as-is
    return name.translate(_ASCII_LOWER)


_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


# ==============================
# Base Container
# ==============================


class TabularData:
    """Holds the data in a tabular format for easy use and retrieval."""

    def __init__(self, original_data: Any) -> None:
        self.data: Dict[str, Column] = {}
        self._original_data = original_data
        self._column_names: List[str] = []
        self._nbr_rows = 0
        self._column_name_map: Dict[str, str] = {}
        self._populated = False

    # ---- columns ----

    @property
    def original_data(self) -> Any:
        return self._original_data

    @property
    def column_names(self) -> List[str]:
        return list(self._column_names)  # copy, avoid manipulation

    @column_names.setter
    def column_names(self, names: Iterable[str]) -> None:
        self.set_column_names(names)

    def set_column_names(self, names: Iterable[str]) -> None:
        """
        Set the column names in the same order as the data. This also dictates
        the number of columns. Rebuilds the case-insensitive lookup.
        """
        self._column_names = list(names)
        self._column_name_map = {_fold(name): name for name in self._column_names}

    @property
    def nbr_columns(self) -> int:
        return len(self._column_names)

    @property
    def nbr_rows(self) -> int:
        return self._nbr_rows

    def get_original_column_name(self, column_name: str) -> Optional[str]:
        return self._column_name_map.get(_fold(column_name))

    def has_column(self, column_name: str) -> bool:
        return _fold(column_name) in self._column_name_map

    # ---- population ----

    def _start_population(self) -> None:
        if self._populated:
            raise RuntimeError(f"{type(self).__name__} is already populated")
        self._populated = True

    def populate_data_by_row(self, rows: Sequence[Sequence[Cell]]) -> None:
        """
        Populate from row-major data:
            [0]: [a, b, 1]
            [1]: [c, d, 2]
        Each row is aligned to the column names. Extra trailing values are ignored.
        A repeated column name keeps the values of its last position, as with
        populate_data_by_column.
        """
        self._start_population()
        names = self._column_names
        for row_idx, row in enumerate(rows):
            if len(row) < len(names):
                raise ValueError(
                    f"Row {row_idx} has {len(row)} values, expected {len(names)}"
                )
        per_position = [[row[col_idx] for row in rows] for col_idx in range(len(names))]
        columns: Dict[str, Column] = {}
        for name, values in zip(names, per_position):
            columns[name] = values
        self.data = columns
        self._nbr_rows = len(rows)

    def populate_data_by_column(self, columns: Sequence[Sequence[Cell]]) -> None:
        """
        Populate from column-major data, one array per column name in the same
        order. Arrays are shallow-copied. The row count is the length of the
        first array.
        """
        self._start_population()
        if len(columns) < self.nbr_columns:
            raise ValueError(
                f"Got {len(columns)} column arrays for {self.nbr_columns} column names"
            )
        data: Dict[str, Column] = {}
        for name, values in zip(self._column_names, columns):
            data[name] = list(values)
        self.data = data
        self._nbr_rows = len(columns[0]) if columns else 0

    # ---- reads ----

    def get_data_as_table(self, column_names: Union[None, str, Sequence[str]] = None) -> List[Row]:
        """
        Return the requested columns as rows:
            [[a, b, 1],
             [c, d, 2]]

        column_names:
            None or empty: all columns, in stored order
            str: a single column
            list of str: those columns, in the given order

        A name that does not resolve contributes an empty column; the row count
        follows the first requested column (see zip_columns).
        """
        if isinstance(column_names, str):
            requested: List[str] = [column_names]
        elif not column_names:
            requested = self.column_names
        else:
            requested = list(column_names)

        arrays: List[Sequence[Cell]] = []
        for cname in requested:
            original = self.get_original_column_name(cname)
            if original is not None:
                arrays.append(self.data.get(original, []))
            else:
                logger.warning('Column name "%s" not found (case-insensitive search)', cname)
                arrays.append([])

        return zip_columns(arrays)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(columns={self._column_names!r}, nbr_rows={self._nbr_rows})"