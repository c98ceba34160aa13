# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Values are read from environment variables (case-insensitive) and an
    optional ``.env`` file in the working directory.
    """

    app_name: str = "Gulf Rate"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./gulfrate.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # All listed rates are quoted from this currency
    origin_currency: str = "SAR"

    # Admin sessions
    session_expiry_days: int = 7
    session_cookie_secure: bool = False

    # Outbound email; an empty host disables delivery
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = True
    smtp_use_ssl: bool = False
    smtp_timeout: float = 10.0
    email_from: str = "notifications@gulfrate.com"
    email_from_name: str = "Gulf Rate"

    # Account created by POST /api/admin/setup
    initial_admin_username: str = "admin"
    initial_admin_password: str = "admin123"
    initial_admin_email: str = "admin@gulfrate.com"
    initial_admin_full_name: str = "Administrator"

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )


settings = Settings()
