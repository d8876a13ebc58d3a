"""THAIBILL test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every FileAccess adapter.
- integration/  : Real filesystem interactions.
- e2e/          : The `thaibill` command line invoked through Click's runner.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); use MemoryFileAccess at the
  file boundary.
- Contract tests parametrize implementations to ensure consistent behavior.
"""
