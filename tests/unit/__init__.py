"""Unit tests.

Each module checks one piece of THAIBILL on its own: the pure domain
helpers, the in-memory file access, the async service functions over
`MemoryFileAccess`, and the CLI helpers. Config and logging tests touch
`tmp_path` and environment variables through `monkeypatch` only.
"""
