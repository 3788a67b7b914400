"""App settings and config loader."""

import logging
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
	# Server
	HOST: str = Field(default="0.0.0.0")
	PORT: int = Field(default=3000)

	# Logging
	LOG_LEVEL: str = Field(default="INFO")

	# API
	APP_NAME: str = Field(default="Hello World")

	# Empty PORT= falls back to the default like an unset variable
	model_config = SettingsConfigDict(
		env_file=".env",
		env_file_encoding="utf-8",
		case_sensitive=False,
		env_ignore_empty=True,
	)

	def log_level(self) -> int:
		"""Return the numeric logging level, defaulting to INFO."""
		return getattr(logging, self.LOG_LEVEL.upper(), logging.INFO)

@lru_cache(maxsize=1)
def get_settings() -> Settings:
	"""Return cached settings instance."""
	return Settings()
