"""
numgrid - Numeric Vectors and Matrices

NumPy/MATLAB-like numeric containers with:
- Owned Vector and Matrix types over flat, typed, row-major storage
- Bounds-checked indexing with errors naming the axis and index
- O(1) read-only views (SubVector, RowView, ColumnView, Submatrix)
- Elementwise and scalar-broadcast arithmetic with shape checking
- Random builders with pluggable samplers and CSV loading

Architecture:
    ┌──────────────────────────────────────────────┐
    │        Vector / Matrix (owned, flat)         │
    ├──────────────────────────────────────────────┤
    │  Views: SubVector | RowView | ColumnView     │
    │         Submatrix (always against the root)  │
    └──────────────────────────────────────────────┘

Example:
    >>> import numgrid as ng
    >>>
    >>> m = ng.matrix([3, 1, 4], [1, 5, 9])
    >>> sub = m[0:2, 1:3]          # O(1) Submatrix
    >>> sub.tolist()
    [[1, 4], [5, 9]]
    >>>
    >>> ng.Matrix.ones((2, 2)) + 1
    Matrix([[2.0, 2.0], [2.0, 2.0]], dtype=float64)
    >>>
    >>> v = ng.Vector.range(0, 3)
    >>> 2 - v
    Vector([2, 1, 0], dtype=int64)
"""

__version__ = '0.1.0'

from ._array import Array
from ._config import (
    DTypeConfig,
    LoadConfig,
    NumgridConfig,
    PrintConfig,
    RandomConfig,
    config,
    get_config,
    set_default_dtypes,
    set_printoptions,
    set_seed,
)
from ._dtypes import (
    DType,
    float32,
    float64,
    infer_dtype,
    int8,
    int16,
    int32,
    int64,
    promote_dtype,
    uint8,
    uint16,
    uint32,
    uint64,
    validate_dtype,
)
from ._errors import (
    EmptyContainerError,
    InconsistentShapeError,
    InvalidRangeError,
    InvalidStepValueError,
    LoadError,
    LoadErrorKind,
    NegativeStandardDeviationError,
    NumgridError,
    OutOfBoundsError,
    ShapeMismatchError,
)
from ._iterators import ColumnIterator, ElementIterator, RowIterator
from ._literals import matrix, matrix_of, vector, vector_of
from ._loaders import CSVLoader, load_csv, parse_records, read_records
from ._matrix import Matrix
from ._nested import (
    DimensionalBuilder,
    LinspaceBuilder,
    RangeBuilder,
    arange,
    dim,
    four_dim,
    linspace,
    one_dim,
    shape,
    size,
    three_dim,
    two_dim,
)
from ._random import NumpySampler, RandomMatrixBuilder, RandomVectorBuilder, Sampler
from ._ranges import Inclusive, RangeKind, inclusive, resolve_range, to_inclusive
from ._typing import GridLike, VectorLike
from ._vector import Vector
from ._views import ColumnView, RowView, Submatrix, SubVector

__all__ = [
    # Containers
    'Vector',
    'Matrix',
    'Array',

    # Views
    'SubVector',
    'RowView',
    'ColumnView',
    'Submatrix',

    # Iterators
    'ElementIterator',
    'RowIterator',
    'ColumnIterator',

    # Protocols
    'VectorLike',
    'GridLike',

    # Ranges
    'Inclusive',
    'RangeKind',
    'inclusive',
    'to_inclusive',
    'resolve_range',

    # Literals
    'vector',
    'vector_of',
    'matrix',
    'matrix_of',

    # Random
    'Sampler',
    'NumpySampler',
    'RandomVectorBuilder',
    'RandomMatrixBuilder',

    # Loading
    'CSVLoader',
    'load_csv',
    'parse_records',
    'read_records',

    # Nested lists
    'DimensionalBuilder',
    'RangeBuilder',
    'LinspaceBuilder',
    'one_dim',
    'two_dim',
    'three_dim',
    'four_dim',
    'arange',
    'linspace',
    'dim',
    'shape',
    'size',

    # Types
    'DType',
    'int8', 'int16', 'int32', 'int64',
    'uint8', 'uint16', 'uint32', 'uint64',
    'float32', 'float64',
    'validate_dtype',
    'promote_dtype',
    'infer_dtype',

    # Errors
    'NumgridError',
    'ShapeMismatchError',
    'OutOfBoundsError',
    'InvalidRangeError',
    'InvalidStepValueError',
    'NegativeStandardDeviationError',
    'InconsistentShapeError',
    'EmptyContainerError',
    'LoadError',
    'LoadErrorKind',

    # Configuration
    'config',
    'get_config',
    'set_seed',
    'set_printoptions',
    'set_default_dtypes',
    'NumgridConfig',
    'RandomConfig',
    'DTypeConfig',
    'PrintConfig',
    'LoadConfig',
]
