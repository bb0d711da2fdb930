"""
Load configuration from config.yaml and .env. The Gemini key only from env.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: str = "") -> str:
        return os.getenv(key, default).strip()

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    coach = data.get("coach", {})
    storage = data.get("storage", {})
    account = data.get("account", {})
    logging_cfg = data.get("logging", {})

    trades_file = env("TRADES_FILE", storage.get("trades_file") or "")

    return Config(
        # Coach (key from env only)
        gemini_api_key=env("GEMINI_API_KEY") or env("API_KEY"),
        gemini_model=env("GEMINI_MODEL", coach.get("model", "gemini-2.5-flash")),
        coach_timeout=env_float("COACH_TIMEOUT", coach.get("timeout_seconds", 30.0)),
        # Storage
        account_file=Path(env("ACCOUNT_FILE", storage.get("account_file", "data/account.json"))),
        trades_file=Path(trades_file) if trades_file else None,
        # First-run account
        default_account_name=account.get("name", "FundedNext"),
        default_balance=float(account.get("balance", 20000.0)),
        default_currency=str(account.get("currency", "USD")).upper(),
        # Logging
        log_level=env("LOG_LEVEL", logging_cfg.get("level", "INFO")),
        log_dir=Path(logging_cfg.get("log_dir", "logs")),
        log_file=logging_cfg.get("log_file", "trade_journal.log"),
    )


class Config:
    """Unified configuration. Immutable after load."""

    __slots__ = (
        "gemini_api_key", "gemini_model", "coach_timeout",
        "account_file", "trades_file",
        "default_account_name", "default_balance", "default_currency",
        "log_level", "log_dir", "log_file",
    )

    def __init__(
        self,
        gemini_api_key: str = "",
        gemini_model: str = "gemini-2.5-flash",
        coach_timeout: float = 30.0,
        account_file: Path = None,
        trades_file: Optional[Path] = None,
        default_account_name: str = "FundedNext",
        default_balance: float = 20000.0,
        default_currency: str = "USD",
        log_level: str = "INFO",
        log_dir: Path = None,
        log_file: str = "trade_journal.log",
    ):
        self.gemini_api_key = gemini_api_key
        self.gemini_model = gemini_model
        self.coach_timeout = coach_timeout
        self.account_file = Path(account_file) if account_file else Path("data/account.json")
        self.trades_file = Path(trades_file) if trades_file else None
        self.default_account_name = default_account_name
        self.default_balance = default_balance
        self.default_currency = default_currency
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else Path("logs")
        self.log_file = log_file
