"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, socialtrack.toml only holds
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    data_file: str | None = None
    default_weight: float = Field(default=1, ge=0, allow_inf_nan=False)


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    decimals: int = Field(default=2, ge=0, le=10)
