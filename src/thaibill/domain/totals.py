"""Totals arithmetic for invoice line items."""

from collections.abc import Iterable

from thaibill.domain.value_objects import CalculationResult, LineItem, TaxType


def calculate_totals(
    items: Iterable[LineItem], tax_rate: float, tax_type: TaxType | str
) -> CalculationResult:
    """Calculate subtotal, tax and total from line items.

    The subtotal is the sum of `quantity * unit_price` over all items and the
    tax amount is `subtotal * tax_rate`. Withholding tax is deducted from the
    subtotal, VAT is added to it. No rounding is applied and numeric input is
    not validated, so NaN or negative values propagate arithmetically.

    Args:
        items: The line items, in invoice order.
        tax_rate: Tax rate as a fraction (e.g. `0.07` for 7 %).
        tax_type: A `TaxType` or its string value.

    Returns:
        CalculationResult: The raw floating-point totals.

    Raises:
        InvalidTaxTypeError: If `tax_type` is not a known tax type.
    """
    sign = TaxType.parse(tax_type).sign
    subtotal = sum((item.quantity * item.unit_price for item in items), 0)
    tax_amount = subtotal * tax_rate
    return CalculationResult(
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=subtotal + sign * tax_amount,
    )
