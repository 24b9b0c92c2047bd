# row filtering and column rescaling on loaded tables
import logging

import pandas as pd

logger = logging.getLogger(__name__)


def filter_rows(table: pd.DataFrame, predicate) -> pd.DataFrame:
    """
    Return a new frame holding only the rows where predicate(row) is true.
    The input frame is left untouched and row keys are preserved.
    """
    if table.empty:
        return table.copy()
    # a NaN result counts as the predicate not holding
    mask = table.apply(predicate, axis=1).eq(True)
    return table.loc[mask].copy()


def filter_below(table: pd.DataFrame, column, threshold) -> pd.DataFrame:
    kept = table.loc[table[column] < threshold].copy()
    logger.info("Kept %s of %s rows with %s < %s", len(kept), len(table), column, threshold)
    return kept


def scale_column(table: pd.DataFrame, column, divisor):
    """Divide every value of one column by divisor, in place."""
    if divisor == 0:
        raise ZeroDivisionError(f"cannot scale column {column!r} by zero")
    table[column] = table[column] / divisor
    return table
