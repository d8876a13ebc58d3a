"""Module including value objects used across the domain layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from thaibill.domain.errors import InvalidDocumentError, InvalidTaxTypeError

Number = int | float


class TaxType(Enum):
    """Enumeration of tax treatments applied to an invoice subtotal.

    Each member carries the sign the tax amount is multiplied by when the
    total is derived: withholding tax is deducted, VAT is added.
    """

    WITHHOLDING = "withholding"
    VAT = "vat"

    @property
    def sign(self) -> int:
        """Return -1 for withholding tax and +1 for VAT."""
        return -1 if self is TaxType.WITHHOLDING else 1

    @property
    def default_rate(self) -> float:
        """Conventional Thai rate for this tax type (3 % withholding, 7 % VAT)."""
        return DEFAULT_TAX_RATES[self]

    @classmethod
    def parse(cls, value: TaxType | str) -> TaxType:
        """Return the member named by `value` (case-insensitive for strings).

        Raises:
            InvalidTaxTypeError: If `value` is not a member or a member's value.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidTaxTypeError(value)


DEFAULT_TAX_RATES: dict[TaxType, float] = {
    TaxType.WITHHOLDING: 0.03,
    TaxType.VAT: 0.07,
}


@dataclass(frozen=True)
class LineItem:
    """One billable entry on an invoice."""

    description: str
    quantity: Number
    unit: str
    unit_price: Number

    @property
    def amount(self) -> Number:
        """Quantity times unit price."""
        return self.quantity * self.unit_price

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LineItem:
        """Build a line item from a JSON object with camelCase keys.

        Raises:
            InvalidDocumentError: If a key is missing or an amount is not numeric.
        """
        if not isinstance(data, Mapping):
            raise InvalidDocumentError(f"line item must be an object, got {data!r}")
        return cls(
            description=str(_require(data, "description")),
            quantity=_as_number(_require(data, "quantity"), "quantity"),
            unit=str(data.get("unit", "")),
            unit_price=_as_number(_require(data, "unitPrice"), "unitPrice"),
        )


@dataclass(frozen=True)
class CalculationResult:
    """Value object holding the derived totals of an invoice."""

    subtotal: float
    tax_amount: float
    total: float


@dataclass(frozen=True)
class InvoiceDocument:
    """Value object representing the input data for one generated document."""

    document_type: str
    document_number: str
    items: tuple[LineItem, ...]
    tax_type: TaxType
    tax_rate: float
    issued_on: str | None = None
    output: str | None = None

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], source: str | None = None
    ) -> InvoiceDocument:
        """Build a document from parsed invoice JSON.

        Accepted keys: `documentType` (or `type`), `documentNumber` (or
        `number`), `items`, `taxType`, optional `taxRate` (defaults to the
        tax type's conventional rate), optional `date` and `output`.

        Args:
            data: The parsed JSON object.
            source: Where the data came from, used in error messages.

        Raises:
            InvalidDocumentError: If the data does not have the expected shape.
        """
        if not isinstance(data, Mapping):
            raise InvalidDocumentError("top-level value must be an object", source)

        try:
            document_type = _first_of(data, "documentType", "type")
            document_number = _first_of(data, "documentNumber", "number")
            raw_items = _require(data, "items")
            if not isinstance(raw_items, list):
                raise InvalidDocumentError("'items' must be a list")
            items = tuple(LineItem.from_mapping(item) for item in raw_items)
            tax_type = TaxType.parse(_require(data, "taxType"))
        except InvalidTaxTypeError as e:
            raise InvalidDocumentError(str(e), source) from e
        except InvalidDocumentError as e:
            if source is None or e.source is not None:
                raise
            raise InvalidDocumentError(e.reason, source) from e

        if (raw_rate := data.get("taxRate")) is None:
            tax_rate = tax_type.default_rate
        else:
            try:
                tax_rate = float(_as_number(raw_rate, "taxRate"))
            except InvalidDocumentError as e:
                raise InvalidDocumentError(e.reason, source) from e

        issued_on = data.get("date")
        output = data.get("output")
        return cls(
            document_type=str(document_type),
            document_number=str(document_number),
            items=items,
            tax_type=tax_type,
            tax_rate=tax_rate,
            issued_on=str(issued_on) if issued_on is not None else None,
            output=str(output) if output else None,
        )


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise InvalidDocumentError(f"missing required key {key!r}") from None


def _first_of(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    raise InvalidDocumentError(f"missing required key {keys[0]!r}")


def _as_number(value: Any, key: str) -> Number:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDocumentError(f"{key!r} must be a number, got {value!r}")
    return value
