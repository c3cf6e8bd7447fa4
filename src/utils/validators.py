"""YAML schema validation and config loading.

Validates the render config (render_canvas.v1.yaml) with pydantic so that
bad values fail fast with the offending key in the message.

Schema:
    schema: render_canvas.v1
    canvas:  {width, height}              pixels, >= 0
    export:  {encoding, output_path}      encoding: truncate | scaled
    logging: {log_level, log_file, json}

Usage:
    from src.utils import validators

    cfg = validators.load_render_canvas_config("configs/render_canvas_v1.yaml")
    cfg.canvas.width
"""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ENCODINGS = {"truncate", "scaled"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# ============================================================================
# RENDER CANVAS SCHEMA V1
# ============================================================================

class CanvasSize(BaseModel):
    """Canvas dimensions in pixels. Zero is legal (empty buffer)."""
    width: int = Field(..., ge=0, description="Width in pixels")
    height: int = Field(..., ge=0, description="Height in pixels")


class ExportSettings(BaseModel):
    """PNG export settings."""
    encoding: str = Field("truncate", description="Float → uint8 channel policy")
    output_path: str = Field("outputs/canvas.png", description="Default PNG path")

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        if v not in _ENCODINGS:
            raise ValueError(f"encoding must be one of {sorted(_ENCODINGS)}, got '{v}'")
        return v


class LoggingSettings(BaseModel):
    """Arguments forwarded to logging_config.setup_logging()."""
    log_level: str = Field("INFO")
    log_file: Optional[str] = Field(None)
    json_format: bool = Field(False, alias="json")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('log_level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got '{v}'")
        return v.upper()


class RenderCanvasV1(BaseModel):
    """Render config (render_canvas.v1.yaml schema)."""
    schema_version: str = Field("render_canvas.v1", alias="schema")
    canvas: CanvasSize
    export: ExportSettings = Field(default_factory=ExportSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "render_canvas.v1":
            raise ValueError(f"Expected schema 'render_canvas.v1', got '{v}'")
        return v


# ============================================================================
# PUBLIC API
# ============================================================================

def load_render_canvas_config(path: Union[str, Path]) -> RenderCanvasV1:
    """Load and validate the render config from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to a render_canvas.v1 YAML file

    Returns
    -------
    RenderCanvasV1
        Validated configuration

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (message names the file and the bad field)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Render config not found: {path}")

    data = fs.load_yaml(path)
    try:
        return RenderCanvasV1(**data)
    except Exception as e:
        raise ValueError(f"Render config validation failed at {path}: {e}") from e
