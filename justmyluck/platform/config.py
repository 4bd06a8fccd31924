from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "JustMyLuck"
    PORT: int = 3000

    # Comma-separated; empty means every origin is accepted
    FRONTEND_ORIGINS: str = ""

    # ── Logging ─────────────────────────────────
    LOG_DIR: str = "logs"
    LOG_FILE: str = "justmyluck.log"

    # ── Database ────────────────────────────────
    DB_PATH: str = str(PROJECT_ROOT / "data" / "subscribers.db")

    # ── Email Configuration ─────────────────────
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    # TLS from the first byte only when exactly "true"
    SMTP_SECURE: str = "false"
    SMTP_USER: Optional[str] = None
    SMTP_PASS: Optional[str] = None

    NOTIFY_FROM: Optional[str] = None
    NOTIFY_TO: Optional[str] = None

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.FRONTEND_ORIGINS.split(",") if origin.strip()]

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.DB_PATH}"

    @property
    def smtp_secure(self) -> bool:
        return self.SMTP_SECURE == "true"

    @property
    def log_file_path(self) -> Path:
        return Path(self.LOG_DIR) / self.LOG_FILE

    @property
    def notify_sender(self) -> Optional[str]:
        return self.NOTIFY_FROM or self.SMTP_USER

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
