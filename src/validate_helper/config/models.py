"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, validate-helper.toml only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from validate_helper.validate import DEFAULT_MIN_PASSWORD_LENGTH


class PasswordConfig(BaseModel):
    """[password] section."""

    model_config = {"frozen": True}

    min_length: int = Field(default=DEFAULT_MIN_PASSWORD_LENGTH, ge=1)
