from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # bcrypt work factor; the number of rounds is 2**BCRYPT_COST
    BCRYPT_COST: int = 6
    # Salt randomness: False = fast non-cryptographic source, True = OS CSPRNG
    BCRYPT_STRONG: bool = False

    # App
    APP_NAME: str = "bcrypt helper"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"


settings = Settings()
