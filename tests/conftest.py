"""Global pytest fixtures for THAIBILL.

Tests are marked by the top-level directory they live in
(`tests/unit/` → `unit`, `tests/e2e/` → `e2e`, ...), so
`pytest -m "not e2e"` skips the CLI runs.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.invoices",
]

TESTS_ROOT = Path(__file__).parent.resolve()
LAYER_MARKERS = ("unit", "contract", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default layer mark to items that do not carry one."""
    for item in items:
        try:
            layer = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if layer not in LAYER_MARKERS:
            continue
        if not any(marker.name == layer for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, layer))


@pytest.fixture(autouse=True)
def _clean_thaibill_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear THAIBILL_* variables so the runner's environment cannot leak in."""
    for name in ("THAIBILL_OUTPUT_DIR", "THAIBILL_DATA_ROOT", "THAIBILL_LOGGER_LEVELS"):
        monkeypatch.delenv(name, raising=False)
