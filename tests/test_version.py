import pytest

from aifilesorter.version import Version


def test_str_of_empty_version_is_zero():
    assert str(Version()) == "0"


def test_str_joins_segments_with_dots():
    assert str(Version(1, 2, 3)) == "1.2.3"


def test_constructor_accepts_iterable():
    assert Version([4, 5, 6]).digits == (4, 5, 6)
    assert Version(4, 5, 6).digits == (4, 5, 6)


@pytest.mark.parametrize("text", ["1.2.3", "0.0.1", "10.20", "7"])
def test_parse_round_trip(text):
    assert str(Version.parse(text)) == text


def test_parse_empty_string_gives_empty_version():
    assert Version.parse("").digits == ()


@pytest.mark.parametrize("text", ["1..2", "a.b", "1.x.3"])
def test_parse_rejects_non_numeric_segments(text):
    with pytest.raises(ValueError):
        Version.parse(text)


def test_missing_segments_compare_as_zero():
    assert Version(1, 2) == Version(1, 2, 0)
    assert Version(1, 2) >= Version(1, 2, 0)
    assert Version(1, 2) <= Version(1, 2, 0)
    assert not Version(1, 2) > Version(1, 2, 0)
    assert not Version(1, 2) < Version(1, 2, 0)


def test_equal_versions_hash_alike():
    assert hash(Version(1, 2)) == hash(Version(1, 2, 0, 0))


@pytest.mark.parametrize(
    "low, high",
    [
        ("0.9.9", "1.0.0"),
        ("1.2", "1.2.1"),
        ("1.10", "2"),
        ("0", "0.0.1"),
        ("1.2.3", "1.3"),
    ],
)
def test_ordering(low, high):
    lo, hi = Version.parse(low), Version.parse(high)
    assert lo < hi
    assert lo <= hi
    assert hi > lo
    assert hi >= lo
    assert not lo >= hi
    assert not hi <= lo
    assert lo != hi


def test_sorting_uses_numeric_segments():
    versions = [Version.parse(t) for t in ["1.10.0", "1.2.0", "1.9"]]
    assert [str(v) for v in sorted(versions)] == ["1.2.0", "1.9", "1.10.0"]


def test_equal_versions_are_both_ge_and_le():
    a, b = Version(3, 1, 4), Version.parse("3.1.4")
    assert a >= b and a <= b and a == b


def test_comparison_with_other_type_is_not_supported():
    with pytest.raises(TypeError):
        Version(1) < "1"