"""CLI test fixtures."""

import pytest
from click.testing import CliRunner

from tradejournal.system import LoggerFactory, reload_system_config


@pytest.fixture
def cli_runner():
    """Fixture providing Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch):
    """Run commands in an empty working directory with default config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TRADEJOURNAL_CONFIG", raising=False)
    reload_system_config()
    yield
    LoggerFactory.reset()
    reload_system_config()


@pytest.fixture
def losing_journal(tmp_path):
    """Three recent losses followed by an older win (most recent first)."""
    path = tmp_path / "losing.json"
    path.write_text(
        """
[
  {"symbol": "AMD", "direction": "long", "entry_price": 100, "exit_price": 95, "quantity": 1, "created_at": "2025-03-06T15:00:00"},
  {"symbol": "AMD", "direction": "long", "entry_price": 100, "exit_price": 97, "quantity": 1, "created_at": "2025-03-05T15:00:00"},
  {"symbol": "AMD", "direction": "short", "entry_price": 100, "exit_price": 104, "quantity": 1, "created_at": "2025-03-04T15:00:00"},
  {"symbol": "AMD", "direction": "long", "entry_price": 100, "exit_price": 120, "quantity": 1, "created_at": "2025-03-03T15:00:00"}
]
"""
    )
    return path
