"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from uuid import UUID

import pytest

from orders.domain import OrderId, SleeveCounts
from orders.domain.catalog import GarmentType
from orders.domain.errors import ErrorCode, MissingIdentityError, SleeveExceedsGarmentCountError, StoreError
from orders.domain.value_objects import clamp_quantity


class TestSleeveCounts:
    """Tests for SleeveCounts value object."""

    def test_defaults_to_zero(self):
        counts = SleeveCounts()
        assert counts.long == 0
        assert counts.ruffled == 0
        assert counts.assigned == 0

    def test_rejects_negative_values(self):
        with pytest.raises(ValueError):
            SleeveCounts(long=-1)
        with pytest.raises(ValueError):
            SleeveCounts(ruffled=-1)

    def test_short_is_the_remainder(self):
        assert SleeveCounts(long=2, ruffled=1).short_for(5) == 2

    def test_clamped_to_shrinks_long_first(self):
        assert SleeveCounts(long=2, ruffled=2).clamped_to(1) == SleeveCounts(long=1, ruffled=0)

    def test_clamped_to_gives_remainder_to_ruffled(self):
        assert SleeveCounts(long=2, ruffled=2).clamped_to(3) == SleeveCounts(long=2, ruffled=1)

    def test_clamped_to_keeps_fitting_counts(self):
        counts = SleeveCounts(long=1, ruffled=1)
        assert counts.clamped_to(5) == counts


class TestOrderId:
    """Tests for OrderId value object."""

    def test_from_string_valid_uuid(self):
        value = "2b0d7b3e-6c5f-4e3a-9f51-3c3c1f8a9d10"
        order_id = OrderId.from_string(value)
        assert order_id.value == UUID(value)
        assert str(order_id) == value

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            OrderId.from_string("not-a-uuid")


class TestClampQuantity:
    def test_negative_becomes_zero(self):
        assert clamp_quantity(-3) == 0

    def test_positive_is_kept(self):
        assert clamp_quantity(4) == 4


class TestDomainErrors:
    """Domain errors carry a code and a user-safe message."""

    def test_str_includes_code(self):
        err = MissingIdentityError("region")
        assert str(err) == "MISSING_IDENTITY: Please fill in region"
        assert err.field == "region"

    def test_sleeve_error_names_garment(self):
        err = SleeveExceedsGarmentCountError(GarmentType.TEE)
        assert err.code is ErrorCode.SLEEVE_EXCEEDS_GARMENT_COUNT
        assert err.garment is GarmentType.TEE
        assert "Tee" in err.message

    def test_store_error_has_generic_retry_message(self):
        assert "try again" in StoreError().message
