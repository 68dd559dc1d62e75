"""
Tests for dotted version comparison.
"""

import pytest
from studio_client.utils.versioning import VersionParseError, compare_versions


def test_same_version():
    assert compare_versions("1.2.3", "1.2.3") == 0


def test_later_minor_version():
    assert compare_versions("1.3.0", "1.2.9") > 0
    assert compare_versions("1.2.9", "1.3.0") < 0


def test_later_major_version():
    assert compare_versions("2.0.0", "1.9.9") > 0


def test_result_is_component_difference():
    assert compare_versions("2.0.0", "1.9.9") == 1
    assert compare_versions("1.0", "1.7") == -7
    assert compare_versions("1.4.12", "1.4.2") == 10


def test_components_compared_numerically():
    assert compare_versions("1.10", "1.9") > 0


@pytest.mark.parametrize("shorter, longer", [
    ("1.2", "1.2.99"),
    ("1", "1.0.0"),
    ("3.1", "3.1.0.4"),
])
def test_shared_prefix_is_equal(shorter, longer):
    assert compare_versions(shorter, longer) == 0
    assert compare_versions(longer, shorter) == 0


def test_leading_zeros_and_signs():
    assert compare_versions("1.02", "1.2") == 0
    assert compare_versions("+1.0", "1.0") == 0


def test_trailing_dot_is_ignored():
    assert compare_versions("1.2.", "1.2") == 0


def test_non_numeric_component_raises():
    with pytest.raises(VersionParseError, match="'x'"):
        compare_versions("1.x.0", "1.2.0")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        compare_versions("1.2.0", "1.2.beta")


def test_parse_error_details():
    with pytest.raises(VersionParseError) as exc_info:
        compare_versions("1.2.0", "1.2-rc1")
    assert exc_info.value.version == "1.2-rc1"
    assert exc_info.value.component == "2-rc1"


@pytest.mark.parametrize("bad", ["", "1..2", "1_0.0", " 1.0", "v1.0"])
def test_invalid_literals_raise(bad):
    with pytest.raises(VersionParseError):
        compare_versions(bad, "1.0")


def test_earlier_difference_wins_over_bad_component():
    # Comparison stops at the first difference, later components are not parsed
    assert compare_versions("2.x", "1.y") == 1


def test_uncompared_trailing_component_not_parsed():
    assert compare_versions("1.2", "1.2.garbage") == 0
