import pytest

import semcommit.output


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Plain text output regardless of the terminal running the tests."""
    monkeypatch.setattr(semcommit.output, "COLORS_ENABLED", False)
