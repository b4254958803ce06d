"""
Colour Map Settings

Defaults for rendering and animating colour maps, validated with pydantic
so out-of-range settings fail at load time instead of mid-frame.
"""

from typing import Literal

from pydantic import BaseModel, Field

from .color_map import DEFAULT_IDW_EXPONENT, MAX_IDW_EXPONENT, MIN_IDW_EXPONENT

DEFAULT_TEXTURE_SIZE = 128  # Editor preview resolution
DEFAULT_PRESET = "corners"


class ColorMapSettings(BaseModel):
    """Runtime settings for the CLI, viewer and texture materializer."""

    idw_exponent: float = Field(
        default=DEFAULT_IDW_EXPONENT, ge=MIN_IDW_EXPONENT, le=MAX_IDW_EXPONENT,
        description="Colour intensity falloff. Low values merge quickly, "
                    "high values look like a voronoi diagram.",
    )
    texture_size: int = Field(
        default=DEFAULT_TEXTURE_SIZE, ge=2, le=4096,
        description="Width and height of materialized textures",
    )
    morph_time_constant: float = Field(
        default=2.0, gt=0.0,
        description="Seconds for an animated morph to cover ~63% of the way",
    )
    draw_debug_info: bool = Field(
        default=False,
        description="Mark key positions on materialized textures",
    )
    preset: str = Field(default=DEFAULT_PRESET)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
