from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TRIPOD_", env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Tripod Planner"
    API_V1_STR: str = "/api/v1"

    # Upper bounds for a single optimize request
    MAX_ITEMS_PER_OPTIMIZE: int = 200
    OPTIMIZE_TIME_LIMIT: float = 10.0


settings = Settings()
