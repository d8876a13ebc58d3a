"""Unit tests for thaibill.domain.totals."""

import math

import pytest

from thaibill.domain.errors import InvalidTaxTypeError
from thaibill.domain.totals import calculate_totals
from thaibill.domain.value_objects import CalculationResult, LineItem, TaxType

# pylint: disable=magic-value-comparison

ITEMS = (
    LineItem(description="Design", quantity=2, unit="job", unit_price=400),
    LineItem(description="Hosting", quantity=1, unit="year", unit_price=200),
)


def test_subtotal_is_sum_of_quantity_times_unit_price():
    """The subtotal adds up quantity * unit_price over every item."""
    result = calculate_totals(ITEMS, 0.07, TaxType.VAT)
    assert result.subtotal == 2 * 400 + 1 * 200


def test_vat_is_added_to_subtotal():
    """VAT increases the payable total."""
    result = calculate_totals(ITEMS, 0.07, TaxType.VAT)
    assert result.tax_amount == 1000 * 0.07
    assert result.total == result.subtotal + result.tax_amount


def test_withholding_is_deducted_from_subtotal():
    """Withholding tax reduces the payable total."""
    result = calculate_totals(ITEMS, 0.03, TaxType.WITHHOLDING)
    assert result.tax_amount == 1000 * 0.03
    assert result.total == result.subtotal - result.tax_amount


@pytest.mark.parametrize("tax_type", ["vat", "withholding", "VAT", " Withholding "])
def test_tax_type_accepts_string_values(tax_type):
    """String tax types are parsed case-insensitively."""
    expected = TaxType(tax_type.strip().lower())
    assert calculate_totals(ITEMS, 0.05, tax_type) == calculate_totals(
        ITEMS, 0.05, expected
    )


@pytest.mark.parametrize("tax_type", list(TaxType))
def test_empty_items_yield_zero_totals(tax_type):
    """An empty invoice has zero subtotal, tax and total for both tax types."""
    result = calculate_totals([], 0.07, tax_type)
    assert result == CalculationResult(subtotal=0, tax_amount=0, total=0)


def test_no_rounding_is_applied():
    """Raw floating point values are returned."""
    items = [LineItem(description="x", quantity=3, unit="pc", unit_price=0.1)]
    result = calculate_totals(items, 0.07, TaxType.VAT)
    assert result.subtotal == 3 * 0.1
    assert result.subtotal != 0.3


def test_accepts_any_iterable_of_items():
    """A generator of items is consumed once and summed."""
    result = calculate_totals((item for item in ITEMS), 0, TaxType.VAT)
    assert result.total == 1000


def test_nan_propagates_without_error():
    """Malformed numeric input is not validated."""
    items = [LineItem(description="x", quantity=math.nan, unit="pc", unit_price=1)]
    result = calculate_totals(items, 0.07, TaxType.VAT)
    assert math.isnan(result.subtotal)
    assert math.isnan(result.total)


def test_unknown_tax_type_raises():
    """A tax type other than withholding/vat is rejected."""
    with pytest.raises(InvalidTaxTypeError, match="'gst'"):
        calculate_totals(ITEMS, 0.07, "gst")
