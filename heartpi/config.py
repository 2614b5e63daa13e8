from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the HeartPi service."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("HEARTPI_DATA_ROOT") or data_root_default
        ).expanduser()
        self.readings_csv: Path = Path(
            os.environ.get("HEARTPI_READINGS_CSV") or (self.data_root / "sensor_log.csv")
        ).expanduser()
        self.history_csv: Path = Path(
            os.environ.get("HEARTPI_HISTORY_CSV") or (self.data_root / "userdata.csv")
        ).expanduser()
        self.error_log_path: Path = Path(
            os.environ.get("HEARTPI_ERROR_LOG") or (self.data_root / "Error_log.txt")
        ).expanduser()
        self.log_level: str = (os.environ.get("HEARTPI_LOG_LEVEL") or "INFO").upper()
        self.history_samples: int = int(os.environ.get("HEARTPI_HISTORY_SAMPLES") or "20")
        self.host: str = os.environ.get("HEARTPI_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("HEARTPI_PORT") or "8000")

        # ---- Caregiver alerts (SMTP) ----
        self.smtp_host: str = os.environ.get("HEARTPI_SMTP_HOST", "smtp.gmail.com")
        self.smtp_port: int = int(os.environ.get("HEARTPI_SMTP_PORT") or "587")
        self.smtp_use_tls: bool = (os.environ.get("HEARTPI_SMTP_USE_TLS") or "1").strip() in {"1", "true", "True"}
        self.smtp_timeout: float = float(os.environ.get("HEARTPI_SMTP_TIMEOUT") or "30")
        # Names of the env vars holding the sender credentials, not the credentials themselves.
        self.smtp_address_env: str = os.environ.get("HEARTPI_SMTP_ADDRESS_ENV", "HEARTPI_EMAIL_ADDRESS")
        self.smtp_password_env: str = os.environ.get("HEARTPI_SMTP_PASSWORD_ENV", "HEARTPI_EMAIL_PASSWORD")

        cors = os.environ.get("HEARTPI_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
