"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cleancore.toml only contains
overrides. An absent file means every section uses its defaults.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- cleancore.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    blank_strings_are_empty: bool = False


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False
