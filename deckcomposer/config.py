from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKCOMPOSER_")

    app_name: str = "DeckComposer"
    debug: bool = False

    # Exact number of cards a deck must hold to be playable
    deck_size: int = Field(default=30, ge=1)

    # Copies of a single card definition allowed in one deck
    max_duplicates: int = Field(default=3, ge=1)

    # When True, the copy limit for an owned card is min(max_duplicates, owned).
    # When False, only max_duplicates applies (cap-only arithmetic).
    enforce_ownership: bool = True

    # Locale used for user-facing notices when the caller does not pick one
    default_locale: str = "ja"


settings = Settings()
