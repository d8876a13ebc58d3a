"""Integration tests.

`LocalFileAccess` against a real directory tree under `tmp_path`:
root joining, absolute paths, permissions and UTF-8 decoding.
"""
