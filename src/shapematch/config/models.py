"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shapematch.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SchemasConfig(BaseModel):
    """[schemas] section."""

    model_config = {"frozen": True}

    # Directories searched when importing ``module:NAME`` references.
    # Relative entries resolve against the config file's directory.
    search_paths: list[str] = Field(default_factory=list)


class PayloadConfig(BaseModel):
    """[payload] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"

