"""
Readers that extract a numeric column from CSV and JSON data files.

Non-numeric and non-finite cells are dropped, so the summarizer only
ever sees finite observations.
"""

import json
from pathlib import Path
from typing import Any, Iterable, List, Union

import numpy as np
import pandas as pd

from ..config import get_logger
from ..config.constants import FILE_TYPE_CSV, FILE_TYPE_JSON, FILE_TYPE_PARQUET
from ..utils import (
    ColumnNotFoundException,
    DataParsingException,
    UnsupportedFileTypeException
)

logger = get_logger(__name__)

PathLike = Union[str, Path]


def _numeric_values(raw: Iterable[Any]) -> List[float]:
    # JSON booleans are not observations
    cells = [None if isinstance(v, bool) else v for v in raw]
    series = pd.to_numeric(pd.Series(cells, dtype=object), errors="coerce")
    values = series.to_numpy(dtype=float)
    return values[np.isfinite(values)].tolist()


def parse_csv(file_path: PathLike, column_name: str) -> List[float]:
    """
    Extract numeric values of one column from a CSV file.
    
    Args:
        file_path: Path to the CSV file
        column_name: Header of the numeric column
        
    Returns:
        Numeric values in file order
    """
    try:
        header = pd.read_csv(file_path, nrows=0, skipinitialspace=True).columns
        width = len(header)
        # rows with extra trailing fields keep their leading cells
        df = pd.read_csv(
            file_path,
            dtype=str,
            skipinitialspace=True,
            engine="python",
            index_col=False,
            on_bad_lines=lambda fields: fields[:width]
        )
    except pd.errors.EmptyDataError:
        df = pd.DataFrame()
    except (OSError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataParsingException(
            f"Failed to read CSV file: {e}",
            details={"path": str(file_path)}
        )
    
    if df.empty:
        raise DataParsingException(
            "CSV file must have header and at least one data row",
            details={"path": str(file_path)}
        )
    
    df.columns = [str(col).strip() for col in df.columns]
    if column_name not in df.columns:
        available = ", ".join(df.columns)
        raise ColumnNotFoundException(
            f'Column "{column_name}" not found in CSV. Available: {available}',
            details={"column": column_name, "available": list(df.columns)}
        )
    
    values = _numeric_values(df[column_name])
    logger.debug("csv_parsed", path=str(file_path), rows=len(df), values=len(values))
    
    return values


def parse_json(file_path: PathLike, column_name: str) -> List[float]:
    """
    Extract numeric values from a JSON file.
    
    Accepts either an array of objects (values read from ``column_name``
    of each object) or an object whose ``column_name`` property is an array.
    
    Args:
        file_path: Path to the JSON file
        column_name: Key holding the numeric values
        
    Returns:
        Numeric values in file order
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataParsingException(
            f"Failed to read JSON file: {e}",
            details={"path": str(file_path)}
        )
    
    if isinstance(data, list):
        values = _numeric_values(
            item.get(column_name) if isinstance(item, dict) else None
            for item in data
        )
        if not values:
            raise DataParsingException(
                f'No numeric values found in column "{column_name}"',
                details={"path": str(file_path), "column": column_name}
            )
        logger.debug("json_parsed", path=str(file_path), records=len(data), values=len(values))
        return values
    
    if isinstance(data, dict) and isinstance(data.get(column_name), list):
        values = _numeric_values(data[column_name])
        logger.debug("json_parsed", path=str(file_path), values=len(values))
        return values
    
    raise DataParsingException(
        "JSON must be array of objects or object with array property",
        details={"path": str(file_path), "column": column_name}
    )


def load_values(file_path: PathLike, file_type: str, column_name: str) -> List[float]:
    """
    Read the numeric column of a data file.
    
    Args:
        file_path: Path to the data file
        file_type: One of "csv" or "json"
        column_name: Column or key holding the numeric values
        
    Returns:
        Numeric values in file order
    """
    path = Path(file_path)
    if not path.exists():
        raise DataParsingException(
            f"File not found: {path}",
            details={"path": str(path)}
        )
    
    file_type = file_type.lower()
    if file_type == FILE_TYPE_CSV:
        return parse_csv(path, column_name)
    elif file_type == FILE_TYPE_JSON:
        return parse_json(path, column_name)
    elif file_type == FILE_TYPE_PARQUET:
        raise UnsupportedFileTypeException(
            "Parquet support requires additional dependencies. Use CSV or JSON.",
            details={"file_type": file_type}
        )
    
    raise UnsupportedFileTypeException(
        f"Unsupported file type: {file_type}",
        details={"file_type": file_type}
    )
