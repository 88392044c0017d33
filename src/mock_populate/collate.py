"""
Column to row transposition.
"""

from typing import Any, List, Sequence


def collate(*columns: Sequence[Any]) -> List[List[Any]]:
    """
    Transpose columns into rows by position.

    Row ``i`` collects the ``i``-th value of every column that has one, in
    argument order. Columns may differ in length: rows past the end of a
    shorter column simply hold fewer cells.

    >>> collate([1, 2, 3], ["a"])
    [[1, 'a'], [2], [3]]
    """
    rows: List[List[Any]] = []
    for column in columns:
        for i, value in enumerate(column):
            if i == len(rows):
                rows.append([])
            rows[i].append(value)
    return rows
