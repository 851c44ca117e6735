"""Environment-driven settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    default_mode: str = Field(default="sea", description="Transport mode listed by default")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Does not override variables already set in the environment
    load_dotenv()

    origins = os.getenv("CARGO_CORS_ORIGINS", "*")
    return Settings(
        log_level=os.getenv("CARGO_LOG_LEVEL", "INFO").upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        default_mode=os.getenv("CARGO_DEFAULT_MODE", "sea").strip().lower(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
    )
