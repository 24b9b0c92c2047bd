import csv
import logging
import os
from typing import Iterable, Protocol

import pandas as pd
from pandas.api.types import is_numeric_dtype
from sklearn.datasets import fetch_california_housing

from .errors import MissingColumnError, NonNumericColumnError, ParseError

logger = logging.getLogger(__name__)

# column order of the block-level california_housing.csv
BLOCK_COLUMNS = [
    'longitude', 'latitude', 'housing_median_age', 'total_rooms', 'total_bedrooms',
    'population', 'households', 'median_income', 'median_house_value',
]


class TableReader(Protocol):
    def __call__(self, path, sep: str = ',') -> pd.DataFrame: ...


def _check_field_counts(path, sep):
    # pandas pads short rows with NaN, so ragged files are caught here instead
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.reader(f, delimiter=sep)
        header = next(reader, None)
        if not header:
            raise ParseError(f"{path}: file is empty")
        for row in reader:
            if not row:
                continue
            if len(row) != len(header):
                raise ParseError(
                    f"{path}: line {reader.line_num} has {len(row)} fields, header has {len(header)}")


def load_table(path, sep=',', parse_dates=None) -> pd.DataFrame:
    """
    Read a delimited file with a header row into a DataFrame.

    Column types are inferred by pandas; pass ``parse_dates`` to turn
    named columns into datetimes. Raises ParseError when the file is
    absent, empty or has rows whose field count differs from the header.
    """
    if not os.path.isfile(path):
        raise ParseError(f"{path}: no such file")
    try:
        _check_field_counts(path, sep)
        df = pd.read_csv(path, sep=sep, parse_dates=parse_dates)
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: not valid UTF-8 text") from e
    except pd.errors.EmptyDataError as e:
        raise ParseError(f"{path}: file is empty") from e
    except pd.errors.ParserError as e:
        raise ParseError(f"{path}: {e}") from e
    logger.info("Loaded %s rows x %s columns from %s", df.shape[0], df.shape[1], path)
    return df


def require_numeric_columns(table: pd.DataFrame, columns: Iterable[str]):
    for col in columns:
        if col not in table.columns:
            raise MissingColumnError(col, table.columns)
        if not is_numeric_dtype(table[col]):
            raise NonNumericColumnError(col, table[col].dtype)


def to_block_layout(frame: pd.DataFrame) -> pd.DataFrame:
    """Convert sklearn's per-household averages back into per-block totals."""
    households = (frame['Population'] / frame['AveOccup']).round()
    out = pd.DataFrame({
        'longitude': frame['Longitude'],
        'latitude': frame['Latitude'],
        'housing_median_age': frame['HouseAge'],
        'total_rooms': (frame['AveRooms'] * households).round(),
        'total_bedrooms': (frame['AveBedrms'] * households).round(),
        'population': frame['Population'],
        'households': households,
        'median_income': frame['MedInc'],
        # sklearn stores the target in units of 100,000
        'median_house_value': (frame['MedHouseVal'] * 100000).round(),
    })
    return out[BLOCK_COLUMNS]


def save_raw(path="Data/california_housing.csv"):
    ds = fetch_california_housing(as_frame=True)
    df = to_block_layout(ds.frame)
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    df.to_csv(path, index=False)
    logger.info("Saved raw dataset (%s rows) to %s", len(df), path)
    print("Saved raw dataset to:", path)
    return path


def main(argv=None):
    import argparse
    p = argparse.ArgumentParser(prog='housing-fetch-data',
                                description='Download the California housing dataset as a block-level CSV.')
    p.add_argument('path', nargs='?', default='Data/california_housing.csv')
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(message)s')
    save_raw(args.path)


if __name__ == '__main__':
    main()
