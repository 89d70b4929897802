from pydantic_settings import BaseSettings, SettingsConfigDict


class RecommenderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="RECOMMENDER_", extra="ignore"
    )

    # strategy used when the caller does not name one
    strategy: str = "content"
    top_k: int = 3

    genre_weight: float = 0.3
    producer_weight: float = 0.5

    log_level: str = "INFO"
