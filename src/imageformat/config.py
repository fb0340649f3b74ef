"""Service configuration."""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "IMAGEFORMAT_"


class ServiceConfig(BaseModel):
    """Configuration for the HTTP service."""

    root: Path = Field(default=Path("."), description="Directory processed images are stored in")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)
    max_upload_bytes: int = Field(
        default=20 * 1024 * 1024, gt=0, description="Largest accepted upload"
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        """Build from IMAGEFORMAT_* environment variables, defaults for the rest."""
        environ = os.environ if environ is None else environ
        values = {}
        for field_name in cls.model_fields:
            value = environ.get(ENV_PREFIX + field_name.upper())
            if value:
                values[field_name] = value
        return cls(**values)
