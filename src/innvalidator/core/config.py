"""Library configuration using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ValidatorSettings(BaseSettings):
    """Runtime settings. Only logging reads them; validation results never depend on them."""

    model_config = {"env_prefix": "INNVALIDATOR_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
