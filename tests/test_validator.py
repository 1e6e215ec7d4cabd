"""Test class OperandValidator."""
import pytest

from arithmetic_http_server.common.validator import OperandValidator


@pytest.mark.parametrize("token,expected", [
    ("0", 0.0),
    ("2", 2.0),
    ("-1", -1.0),
    ("2.5", 2.5),
    ("1e9", 1e9),
    ("-1e9", -1e9),
    ("1e-3", 0.0010000000474974513),  # nearest float32
])
def test_validate_valid(token, expected):
    """validate returns the float32 value of in-range tokens."""
    assert OperandValidator.validate(token) == expected


@pytest.mark.parametrize("token", ["abc", "", "1.2.3", "01", "+1", "1e"])
def test_validate_malformed(token):
    """validate rejects tokens that are not JSON numbers."""
    with pytest.raises(ValueError, match="Invalid number format. Should be a JSON number"):
        OperandValidator.validate(token)


@pytest.mark.parametrize("token", ["2e9", "1000000100", "1e400"])
def test_validate_too_large(token):
    """validate rejects values above 1e9."""
    with pytest.raises(ValueError, match="Number should not be greater than 1e9"):
        OperandValidator.validate(token)


@pytest.mark.parametrize("token", ["-2e9", "-1000000100", "-1e400"])
def test_validate_too_small(token):
    """validate rejects values below -1e9."""
    with pytest.raises(ValueError, match="Number should not be less than -1e9"):
        OperandValidator.validate(token)


def test_validate_rounds_before_range_check():
    """A literal slightly above 1e9 that rounds to 1e9 in float32 is accepted."""
    assert OperandValidator.validate("1000000001") == 1e9
