"""Command-line interface for THAIBILL."""
