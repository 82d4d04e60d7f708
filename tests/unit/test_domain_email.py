"""Unit tests for the Email value object."""

import pytest

from src.domain.value_objects import Email, is_valid_email


@pytest.mark.unit
class TestEmail:
    def test_valid_address_kept(self):
        assert str(Email("ada@example.com")) == "ada@example.com"

    def test_domain_part_lowercased(self):
        assert Email("Ada@Example.COM").value == "Ada@example.com"

    @pytest.mark.parametrize("value", ["", "not-an-email", "ada@", "@example.com"])
    def test_malformed_address_rejected(self, value):
        with pytest.raises(ValueError, match="Invalid email"):
            Email(value)

    def test_is_valid_email(self):
        assert is_valid_email("ada@example.com")
        assert not is_valid_email("ada at example dot com")

    def test_equal_after_normalization(self):
        assert Email("ada@EXAMPLE.com") == Email("ada@example.com")
