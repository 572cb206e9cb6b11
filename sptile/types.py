"""Primitive type limits, option enums and version information."""

from __future__ import annotations

import sys
from enum import IntEnum

IDX_TYPEWIDTH = 64
VAL_TYPEWIDTH = 64
BLAS_INTWIDTH = 32

IDX_MAX = (1 << IDX_TYPEWIDTH) - 1
VAL_MIN = sys.float_info.min
VAL_MAX = sys.float_info.max

MAX_NMODES = 8
VAL_OFF = -sys.float_info.max

VER_MAJOR = 2
VER_MINOR = 0
VER_SUBMINOR = 0


class OptionType(IntEnum):
    """Index of each entry in an options array."""

    NTHREADS = 0
    TOLERANCE = 1
    REGULARIZE = 2
    NITER = 3
    VERBOSITY = 4
    RANDSEED = 5
    CSF_ALLOC = 6
    TILE = 7
    TILELEVEL = 8
    PRIVTHRESH = 9
    DECOMP = 10
    COMM = 11
    NOPTIONS = 12


class ErrorType(IntEnum):
    """Return codes."""

    SUCCESS = 1
    BADINPUT = 2
    NOMEMORY = 3


class VerbosityType(IntEnum):
    """Verbosity levels."""

    NONE = 0
    LOW = 1
    HIGH = 2
    MAX = 3


class TileType(IntEnum):
    """Tiling schemes."""

    NOTILE = 0
    DENSETILE = 1
    SYNCTILE = 2
    COOPTILE = 3


class CsfType(IntEnum):
    """How many compressed tensors to allocate."""

    ONEMODE = 0
    TWOMODE = 1
    ALLMODE = 2


class DecompType(IntEnum):
    """Distributed decomposition schemes."""

    COARSE = 0
    MEDIUM = 1
    FINE = 2


class CommType(IntEnum):
    """Communication patterns."""

    POINT2POINT = 0
    ALL2ALL = 1


def version_major() -> int:
    """Return the major version number."""
    return VER_MAJOR


def version_minor() -> int:
    """Return the minor version number."""
    return VER_MINOR


def version_subminor() -> int:
    """Return the subminor version number."""
    return VER_SUBMINOR


def version_string() -> str:
    """Return the version as 'major.minor.subminor'."""
    return f"{version_major()}.{version_minor()}.{version_subminor()}"