"""Tests for the init_db_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from finance_tracker.adapters import init_db_cli


def test_main_ensures_schema(monkeypatch, capsys):
    """The CLI should create the tables through the database adapter."""
    fake_logger = MagicMock()
    engine = SimpleNamespace(url="sqlite:///finance.db")
    adapter = MagicMock()
    adapter.get_engine.return_value = engine
    calls = []

    monkeypatch.setattr(init_db_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        init_db_cli,
        "SqlAlchemyDatabaseEngineAdapter",
        lambda: adapter,
    )
    monkeypatch.setattr(
        init_db_cli,
        "ensure_schema",
        lambda db_port, logger: calls.append((db_port, logger)),
    )

    init_db_cli.main()

    assert calls == [(adapter, fake_logger)]
    assert "ready" in capsys.readouterr().out
