"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from spacewrap.domain.normalization import Mode

DEFAULT_MODE_ENV_VAR = "SPACEWRAP_DEFAULT_MODE"


class SpaceWrapSettings(BaseModel):
    """Settings shared by the desktop shell and API callers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_mode: Mode = Mode.SINGLE_PARAGRAPH


def load_settings(environ: Mapping[str, str] | None = None) -> SpaceWrapSettings:
    """Build settings; an unknown mode selector raises ConfigError."""
    source = os.environ if environ is None else environ
    raw_mode = source.get(DEFAULT_MODE_ENV_VAR, "").strip()
    if not raw_mode:
        return SpaceWrapSettings()
    return SpaceWrapSettings(default_mode=Mode.parse(raw_mode))
