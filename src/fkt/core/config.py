import logging
import os
from pydantic import BaseModel, field_validator

__all__ = ["Settings", "settings"]


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    LOG_MASKED_ERRORS: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        log_level = os.getenv("FKT_LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level

        log_masked_errors = os.getenv("FKT_LOG_MASKED_ERRORS")
        if log_masked_errors:
            values["LOG_MASKED_ERRORS"] = log_masked_errors

        return cls(**values)


settings = Settings.load()
