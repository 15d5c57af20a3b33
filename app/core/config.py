from typing import Optional
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="flashcards", alias="APP_NAME")
    version: str = Field(default="v1", alias="API_VERSION")
    port: int = Field(default=9000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class GenerationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    model_name: str = Field(default="gemini-2.5-pro", alias="GEMINI_MODEL")
    max_attempts: int = Field(default=3, ge=1, alias="GENERATION_MAX_ATTEMPTS")
    base_delay: float = Field(default=1.0, ge=0, alias="GENERATION_BASE_DELAY")
    default_language: str = Field(
        default="English", alias="GENERATION_DEFAULT_LANGUAGE"
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    generation: GenerationSettings = Field(
        default_factory=lambda: GenerationSettings()
    )

    # Absent key switches the pipeline to offline fallback cards
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")


settings = Settings()
