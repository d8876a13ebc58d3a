"""Bootstrap (composition root) for THAIBILL.

Assembles the application at runtime: picks the concrete file access adapter,
reads configuration, and binds it into the asynchronous service-layer
operations so entrypoints can call them without wiring.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces).
- This package may import: `thaibill.adapters`, `thaibill.service_layer`,
  `thaibill.interfaces`, `thaibill.domain`, and `thaibill.config`.
- Inner layers must not import `thaibill.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
