"""End-to-end tests.

The `thaibill` command is invoked through `click.testing.CliRunner` inside
an isolated filesystem, so flight-recorder files and invoice inputs never
leave the temporary directory.
"""
