"""Domain layer for THAIBILL.

Contains the invoice rules: value objects (line items, tax types, results),
totals arithmetic and Thai locale formatting. Everything here is pure and
synchronous.

Dependency rule: do not import from `thaibill.adapters`,
`thaibill.service_layer` or `thaibill.entrypoints`.
"""
