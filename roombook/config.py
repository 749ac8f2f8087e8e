"""Runtime settings read from the environment (and a ``.env`` file if present)."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    day_start_hour: int = Field(default=8, ge=0, le=23)
    day_end_hour: int = Field(default=18, ge=0, le=23)
    slot_minutes: int = Field(default=30, gt=0, le=60)
    seed_data: bool = True
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_day(self) -> Settings:
        if self.day_end_hour <= self.day_start_hour:
            raise ValueError("day_end_hour must be after day_start_hour")
        if 60 % self.slot_minutes != 0:
            raise ValueError("slot_minutes must divide an hour evenly")
        return self


def load_settings() -> Settings:
    """Build Settings from ``ROOMBOOK_*`` environment variables."""
    load_dotenv()

    values: dict[str, object] = {}
    for field, env_name in (
        ("day_start_hour", "ROOMBOOK_DAY_START_HOUR"),
        ("day_end_hour", "ROOMBOOK_DAY_END_HOUR"),
        ("slot_minutes", "ROOMBOOK_SLOT_MINUTES"),
        ("log_level", "ROOMBOOK_LOG_LEVEL"),
    ):
        raw = os.environ.get(env_name)
        if raw:
            values[field] = raw

    seed = os.environ.get("ROOMBOOK_SEED_DATA")
    if seed:
        values["seed_data"] = seed.strip().lower() in _TRUTHY

    return Settings(**values)
