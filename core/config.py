"""
Runtime configuration read from the environment (.env supported).
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from core import constants

# Load environment
load_dotenv()


class Settings:
    DATA_DIR: str = os.environ.get("TRAINER_DATA_DIR", "data")
    WORDS_FILE: str = os.environ.get("TRAINER_WORDS_FILE", "words.json")
    CONJUGATIONS_FILE: str = os.environ.get("TRAINER_CONJUGATIONS_FILE", "conjugations.json")
    LOG_DIR: str = os.environ.get("TRAINER_LOG_DIR", "log")
    LOG_FILE: str = os.environ.get("TRAINER_LOG_FILE", "trainer.log")
    LOG_LEVEL: str = os.environ.get("TRAINER_LOG_LEVEL", "INFO")
    ROUND_SIZE: int = int(os.environ.get("TRAINER_ROUND_SIZE", constants.ROUND_SIZE))
    TICK_INTERVAL_MS: int = int(
        os.environ.get("TRAINER_TICK_INTERVAL_MS", int(constants.TICK_INTERVAL_SECONDS * 1000))
    )

    @property
    def words_path(self) -> Path:
        return Path(self.DATA_DIR) / self.WORDS_FILE

    @property
    def conjugations_path(self) -> Path:
        return Path(self.DATA_DIR) / self.CONJUGATIONS_FILE

    @property
    def tick_interval_seconds(self) -> float:
        return self.TICK_INTERVAL_MS / 1000


settings = Settings()
