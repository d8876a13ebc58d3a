"""Adapters (infrastructure) for THAIBILL.

Provide concrete implementations of the ports in `thaibill.interfaces`, e.g.
local filesystem and in-memory file access.

Dependency rule: may import `thaibill.interfaces` and `thaibill.domain`; the
domain must not import this package.
"""
