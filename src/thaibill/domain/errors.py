"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidTaxTypeError(DomainError, ValueError):
    """Raised when a value does not name a known tax type."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Unknown tax type {value!r}; expected 'withholding' or 'vat'."
        )
        self.value = value


class InvalidDateError(DomainError, ValueError):
    """Raised when a date string cannot be parsed."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Cannot parse {value!r} as an ISO-8601 date.")
        self.value = value


# ============================================================================
#                       Invoice document related errors
# ============================================================================


class InvalidDocumentError(DomainError):
    """Raised when an invoice document does not have the expected shape."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        where = f" in {source}" if source else ""
        super().__init__(f"Invalid invoice document{where}: {reason}")
        self.reason = reason
        self.source = source
