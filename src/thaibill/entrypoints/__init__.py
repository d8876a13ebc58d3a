"""Entrypoints (inbound adapters) for THAIBILL.

Expose the library to the outside world through the `thaibill` command line.
Parse and validate inputs, call the bootstrapped operations and domain
functions, and present results.

Dependency rule: may import `thaibill.bootstrap`, `thaibill.domain` and
`thaibill.service_layer`; avoid importing `thaibill.adapters` directly.
"""
