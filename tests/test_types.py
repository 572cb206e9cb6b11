from sptile import types
from sptile.types import (
    CommType,
    CsfType,
    DecompType,
    ErrorType,
    OptionType,
    TileType,
    VerbosityType,
    version_major,
    version_minor,
    version_string,
    version_subminor,
)


def test_version_major():
    assert version_major() == types.VER_MAJOR
    assert version_major() == 2


def test_version_minor():
    assert version_minor() == types.VER_MINOR
    assert version_minor() == 0


def test_version_subminor():
    assert version_subminor() == types.VER_SUBMINOR
    assert version_subminor() == 0


def test_version_string_joins_parts():
    assert version_string() == "2.0.0"
    parts = [int(p) for p in version_string().split(".")]
    assert parts == [version_major(), version_minor(), version_subminor()]


def test_option_indexes_are_dense_and_end_with_count():
    looked_up = [OptionType(i) for i in range(len(OptionType))]
    assert looked_up == list(OptionType)
    assert OptionType(len(OptionType) - 1) is OptionType.NOPTIONS


def test_option_lookup_by_index():
    assert OptionType(7) is OptionType.TILE
    assert OptionType(6) is OptionType.CSF_ALLOC


def test_error_codes_start_at_success():
    assert ErrorType(1) is ErrorType.SUCCESS
    assert [ErrorType(i) for i in (1, 2, 3)] == list(ErrorType)


def test_other_enums_are_dense():
    for enum in (VerbosityType, TileType, CsfType, DecompType, CommType):
        assert [enum(i) for i in range(len(enum))] == list(enum)