from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Plain string so tests can fall back to a fixed secret
    JWT_SECRET: str = ""
    JWT_AUDIENCE: str = "volunteer"
