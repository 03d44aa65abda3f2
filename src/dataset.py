import glob
import os

import numpy as np
import pandas as pd
from natsort import natsorted

from gda import Observation

FIELDS = ("x", "y", "class")


class DatasetError(ValueError):
    pass


def _is_missing(value):
    return value is None or (isinstance(value, float) and pd.isna(value)) or value.strip() == ""


def _parse_field(value, field, convert, source, line):
    if _is_missing(value):
        raise DatasetError(f"{source}:{line}: Missing {field}")
    try:
        parsed = convert(value.strip())
    except ValueError as e:
        raise DatasetError(
            f"{source}:{line}: Invalid {field} value {value.strip()!r}"
        ) from e
    # nan and inf parse as floats
    if not np.isfinite(parsed):
        raise DatasetError(
            f"{source}:{line}: Invalid {field} value {value.strip()!r}"
        )
    return parsed


def read_csv_file(path):
    """
    Read observations from a csv file with a header row and the three
    fields x, y, class on every record
    """
    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError as e:
        raise DatasetError(f"{path}: file is empty") from e
    except pd.errors.ParserError as e:
        raise DatasetError(f"{path}: {e}") from e

    if frame.shape[1] != len(FIELDS):
        raise DatasetError(
            f"{path}: expected {len(FIELDS)} fields per record, found {frame.shape[1]}"
        )

    observations = []
    # line 1 is the header
    for line, (x, y, label) in enumerate(frame.itertuples(index=False, name=None), start=2):
        observations.append(
            Observation(
                x=_parse_field(x, "x", float, path, line),
                y=_parse_field(y, "y", float, path, line),
                label=_parse_field(label, "class", int, path, line),
            )
        )
    return observations


def read_data(path):
    """Read a csv file, or every csv file of a directory in natural order"""
    if not os.path.isdir(path):
        return read_csv_file(path)

    data_files = natsorted(glob.glob(os.path.join(path, "*.csv")))
    if not data_files:
        raise DatasetError(f"{path}: no csv files found")

    observations = []
    for data_file in data_files:
        observations.extend(read_csv_file(data_file))
    return observations
