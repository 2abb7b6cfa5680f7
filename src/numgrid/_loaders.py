"""
CSV Loading

Reads a delimited text file with the standard library ``csv`` reader and
parses the records into a Matrix.

Example:
    >>> m = Matrix.from_csv("dataset.csv").has_headers(True).with_dtype("i32").load()
"""

from __future__ import annotations

import csv
import logging
import os
from typing import List, Optional, Sequence, Union

from ._array import Array
from ._dtypes import DType, validate_dtype
from ._errors import LoadError, LoadErrorKind
from ._typing import DTypeLike

__all__ = ['CSVLoader', 'load_csv', 'parse_records', 'read_records']

logger = logging.getLogger("numgrid.loaders")

PathLike = Union[str, "os.PathLike[str]"]


def read_records(path: PathLike, delimiter: str = ",", has_headers: bool = False) -> List[List[str]]:
    """
    Read the raw string records of a CSV file.

    Blank lines are skipped. When ``has_headers`` is set the first record
    is treated as a header and dropped.

    Raises:
        LoadError: IO_ERROR if the file cannot be read, CSV_ERROR if it is
            malformed
    """
    try:
        with open(path, newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle, delimiter=delimiter, strict=True)
            try:
                records = [record for record in reader if record]
            except csv.Error as exc:
                raise LoadError(
                    LoadErrorKind.CSV_ERROR, f"line {reader.line_num}: {exc}"
                ) from exc
    except OSError as exc:
        raise LoadError(LoadErrorKind.IO_ERROR, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise LoadError(LoadErrorKind.CSV_ERROR, f"invalid UTF-8: {exc}") from exc

    if has_headers and records:
        records = records[1:]
    return records


def parse_records(records: Sequence[Sequence[str]], dtype: DTypeLike = None):
    """
    Parse string records into a Matrix.

    Each field is stripped and parsed as a base-10 literal of dtype.

    Args:
        records: Rows of string fields (header already removed)
        dtype: Element type (default float64)

    Returns:
        Matrix with one row per record

    Raises:
        LoadError: EMPTY if there are no records, INCONSISTENT_COLUMNS if
            records differ in length, INVALID_ELEMENT if a field does not
            parse
    """
    from ._matrix import Matrix

    dtype = validate_dtype(dtype)
    if not records:
        raise LoadError(LoadErrorKind.EMPTY)

    ncols = len(records[0])
    flat = []
    for number, record in enumerate(records, start=1):
        if len(record) != ncols:
            raise LoadError(
                LoadErrorKind.INCONSISTENT_COLUMNS,
                f"record {number} has {len(record)} fields, expected {ncols}",
            )
        for field in record:
            try:
                flat.append(dtype.parse(field))
            except ValueError as exc:
                raise LoadError(LoadErrorKind.INVALID_ELEMENT, str(exc)) from exc

    return Matrix._from_flat(len(records), ncols, Array.from_list(flat, dtype))


class CSVLoader:
    """
    Configurable CSV-to-Matrix loader.

    Configuration methods return a new loader, so a loader can be shared
    and specialised freely.

    Args:
        path: File to read
        has_headers: Whether the first record is a header (default from config)
        delimiter: Field delimiter (default from config)
        dtype: Element type of the resulting matrix (default float64)
    """

    __slots__ = ("_path", "_has_headers", "_delimiter", "_dtype")

    def __init__(self, path: PathLike, has_headers: Optional[bool] = None,
                 delimiter: Optional[str] = None, dtype: DTypeLike = None):
        from ._config import config

        defaults = config.load
        self._path = path
        self._has_headers = defaults.has_headers if has_headers is None else bool(has_headers)
        self._delimiter = defaults.delimiter if delimiter is None else delimiter
        self._dtype = validate_dtype(dtype)

    @property
    def path(self) -> PathLike:
        return self._path

    @property
    def headers(self) -> bool:
        """Whether the first record is skipped as a header."""
        return self._has_headers

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def dtype(self) -> DType:
        return self._dtype

    def _replace(self, **changes) -> "CSVLoader":
        options = {
            "has_headers": self._has_headers,
            "delimiter": self._delimiter,
            "dtype": self._dtype,
        }
        options.update(changes)
        return CSVLoader(self._path, **options)

    def has_headers(self, yes: bool = True) -> "CSVLoader":
        """Treat the first record as a header row."""
        return self._replace(has_headers=yes)

    def with_delimiter(self, delimiter: str) -> "CSVLoader":
        """Use a field delimiter other than ``,``."""
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        return self._replace(delimiter=delimiter)

    def with_dtype(self, dtype: Union[DType, str]) -> "CSVLoader":
        """Parse fields as the given element type."""
        return self._replace(dtype=validate_dtype(dtype))

    def load(self):
        """
        Read and parse the file.

        Returns:
            Matrix

        Raises:
            LoadError: See ``read_records`` and ``parse_records``
        """
        logger.debug(
            "Loading %s (has_headers=%s, delimiter=%r, dtype=%s)",
            self._path, self._has_headers, self._delimiter, self._dtype.label,
        )
        records = read_records(self._path, self._delimiter, self._has_headers)
        matrix = parse_records(records, self._dtype)
        logger.debug("Loaded %dx%d matrix from %s", matrix.nrows, matrix.ncols, self._path)
        return matrix

    def __repr__(self) -> str:
        return (f"CSVLoader({str(self._path)!r}, has_headers={self._has_headers}, "
                f"delimiter={self._delimiter!r}, dtype={self._dtype.label})")


def load_csv(path: PathLike, has_headers: Optional[bool] = None, delimiter: Optional[str] = None,
             dtype: DTypeLike = None):
    """Functional form of ``CSVLoader(path, ...).load()``."""
    return CSVLoader(path, has_headers=has_headers, delimiter=delimiter, dtype=dtype).load()
