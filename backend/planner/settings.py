from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# Export defaults
	default_export_title: str = Field(default="Lesson Plan", validation_alias="DEFAULT_EXPORT_TITLE")
	filename_max_length: int = Field(default=100, validation_alias="EXPORT_FILENAME_MAX_LENGTH")

	# Saved lessons untouched for this many days are purged (0 disables)
	lesson_retention_days: int = Field(default=30, validation_alias="LESSON_RETENTION_DAYS")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
