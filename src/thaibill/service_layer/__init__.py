"""Service layer for THAIBILL.

Implements the application use-cases on top of the domain: asynchronous file
checks and JSON loading through the injected file access port, invoice
document loading and output-path derivation.

Dependency rule: may import `thaibill.domain` and `thaibill.interfaces`, but
not `thaibill.adapters` or `thaibill.entrypoints`.
"""
