# grouper/config/settings.py

from typing import Literal, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    ENV: str = "development"
    LOG_LEVEL: str = "WARNING"
    DEFAULT_MODE: Literal["auto", "interactive", "batch"] = "auto"
    RANDOM_SEED: Optional[int] = None  # None -> different groups every run
    SIMULATION_STUDENTS: int = 20

    class Config:
        env_file = ".env"
        env_prefix = "GROUPER_"
        extra = "ignore"

settings = Settings()
