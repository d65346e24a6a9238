"""Configuration management for the client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

CARDS_URL = "https://api.magicthegathering.io/v1/cards"


class Settings(BaseSettings):
    """Client settings."""

    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # API Settings
    cards_url: str = Field(default=CARDS_URL)

    # Narset, Enlightened Master
    demo_card_id: int = Field(default=386616)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
