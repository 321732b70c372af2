"""Tests for free-text field validation."""

import pytest

from compustore.domain.errors import ValidationError
from compustore.utils.fields import require_token


def test_value_is_stripped():
    assert require_token("  Ryzen-7 ", "Product name") == "Ryzen-7"


@pytest.mark.parametrize("value", ["", "   ", None])
def test_empty_value_rejected(value):
    with pytest.raises(ValidationError, match="Product name cannot be empty"):
        require_token(value, "Product name")


@pytest.mark.parametrize("value", ["Main St", "a\tb"])
def test_inner_whitespace_rejected(value):
    with pytest.raises(ValidationError, match="Customer address cannot contain spaces"):
        require_token(value, "Customer address")


def test_empty_field_marker_rejected():
    with pytest.raises(ValidationError, match="Customer surname cannot be '-'"):
        require_token("-", "Customer surname")


def test_hyphenated_value_accepted():
    assert require_token("8-core", "Product description") == "8-core"
