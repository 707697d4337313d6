"""Email settings configuration."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class EmailSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    RESEND_API_KEY: str = ""
    EMAIL_FROM_DOMAIN: str = "mail.volunteerhub.org"
    EMAIL_FROM_NAME: str = "Volunteer Hub"
    EMAIL_FROM_ADDRESS: str = "noreply"
    APP_BASE_URL: str = "http://localhost:5173"
    # Language of administrator notification emails
    EMAIL_LOCALE: Literal["en", "es", "fr"] = "en"
