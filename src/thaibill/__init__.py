"""THAIBILL

Helpers for generating Thai invoices: totals arithmetic for line items,
Thai number and Buddhist-era date formatting, asynchronous JSON input
loading and output-path derivation for the rendered document.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
