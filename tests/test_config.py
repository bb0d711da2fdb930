"""Unit tests for core.config, utils.formatting and the CLI."""

import logging
from pathlib import Path

import pytest
from trade_journal.core.config import load_config
from trade_journal.utils.formatting import currency_symbol, format_money, format_signed_money, month_label

ENV_KEYS = ["GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "COACH_TIMEOUT", "TRADES_FILE", "ACCOUNT_FILE", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown also undoes values loaded from .env
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def test_defaults_without_files(tmp_path):
    cfg = load_config(tmp_path / "missing.yaml", tmp_path)
    assert cfg.gemini_api_key == ""
    assert cfg.gemini_model == "gemini-2.5-flash"
    assert cfg.coach_timeout == 30.0
    assert cfg.trades_file is None
    assert cfg.account_file == Path("data/account.json")
    assert cfg.default_balance == 20000.0
    assert cfg.default_currency == "USD"


def test_yaml_and_env_overlay(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text(
        "account:\n  name: Apex\n  balance: 50000\n  currency: eur\n"
        "storage:\n  trades_file: data/trades.json\n"
        "coach:\n  model: gemini-pro\n  timeout_seconds: 10\n",
        encoding="utf-8",
    )
    (tmp_path / ".env").write_text("GEMINI_API_KEY=secret\n", encoding="utf-8")
    monkeypatch.setenv("COACH_TIMEOUT", "not-a-number")
    cfg = load_config(None, tmp_path)
    assert cfg.gemini_api_key == "secret"
    assert cfg.gemini_model == "gemini-pro"
    assert cfg.coach_timeout == 10
    assert cfg.trades_file == Path("data/trades.json")
    assert cfg.default_account_name == "Apex"
    assert cfg.default_balance == 50000.0
    assert cfg.default_currency == "EUR"


def test_api_key_fallback(tmp_path, monkeypatch):
    monkeypatch.setenv("API_KEY", "fallback")
    assert load_config(tmp_path / "missing.yaml", tmp_path).gemini_api_key == "fallback"


def test_formatting():
    assert currency_symbol("usd") == "$"
    assert currency_symbol("EUR") == "EUR"
    assert format_money(19500) == "$19,500.00"
    assert format_money(-50.456) == "-$50.46"
    assert format_money(1234.5, "GBP") == "GBP1,234.50"
    assert format_signed_money(100) == "+$100.00"
    assert format_signed_money(-100) == "-$100.00"
    assert month_label(2024, 3) == "March 2024"


def test_cli_add_and_month(tmp_path, capsys):
    import main

    (tmp_path / "config.yaml").write_text(
        f"storage:\n  account_file: {tmp_path / 'account.json'}\n  trades_file: {tmp_path / 'trades.json'}\n"
        f"logging:\n  log_dir: {tmp_path / 'logs'}\n",
        encoding="utf-8",
    )
    cfg = ["--config", str(tmp_path / "config.yaml")]
    assert main.main(cfg + ["add", "aapl", "--date", "2024-03-05", "--qty", "10", "--entry", "100", "--exit", "115"]) == 0
    assert main.main(cfg + ["add", "tsla", "--date", "2024-03-05", "--type", "SHORT", "--pnl", "-50"]) == 0
    capsys.readouterr()

    assert main.main(cfg + ["month", "--year", "2024", "--month", "3"]) == 0
    out = capsys.readouterr().out
    assert "Net P&L: +$100.00" in out
    assert "Balance: $20,100.00" in out
    assert "Win rate: 50%" in out

    assert main.main(cfg + ["calendar", "--year", "2024", "--month", "3"]) == 0
    assert "+100.00/2" in capsys.readouterr().out

    assert main.main(cfg + ["analyze", "--year", "2024", "--month", "3"]) == 0
    assert "API Key is missing" in capsys.readouterr().out
    logging.getLogger("trade_journal").handlers.clear()


def test_setup_logging_file_and_handler_replace(tmp_path):
    from trade_journal.core.logger import setup_logging

    log = setup_logging("debug", tmp_path / "logs", "journal.log")
    setup_logging("debug", tmp_path / "logs", "journal.log")
    assert log.name == "trade_journal"
    assert log.level == logging.DEBUG
    assert len(log.handlers) == 2
    logging.getLogger("trade_journal.store.trades").info("Loaded %d trades", 3)
    for handler in log.handlers:
        handler.flush()
    assert "trade_journal.store.trades | Loaded 3 trades" in (tmp_path / "logs" / "journal.log").read_text(encoding="utf-8")
    setup_logging("INFO")
    assert len(log.handlers) == 1
    log.handlers.clear()
