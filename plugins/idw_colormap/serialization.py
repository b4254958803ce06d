"""
Colour Map Serialization

The persisted form is the raw quantized representation, shared with
external editors and materializers:

    {"idw_exponent": 2.0,
     "entries": [{"x": 0, "y": 65535, "r": 255, "g": 0, "b": 0, "weight": 255}]}

Positions are 16-bit (value = x / 65535); colours and weight are bytes
(value = r / 255). Loading never re-quantizes, so a round trip is exact.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .color_map import ColorMap, DEFAULT_IDW_EXPONENT
from .entry import CHANNEL_SCALE, POSITION_SCALE, ColorMapEntry


class EntryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: int = Field(ge=0, le=POSITION_SCALE)
    y: int = Field(ge=0, le=POSITION_SCALE)
    r: int = Field(ge=0, le=CHANNEL_SCALE)
    g: int = Field(ge=0, le=CHANNEL_SCALE)
    b: int = Field(ge=0, le=CHANNEL_SCALE)
    weight: int = Field(default=CHANNEL_SCALE, ge=0, le=CHANNEL_SCALE)


class ColorMapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    idw_exponent: float = Field(default=DEFAULT_IDW_EXPONENT, ge=0.0, le=32.0)
    entries: List[EntryModel] = Field(default_factory=list)


def to_model(color_map):
    return ColorMapModel(
        idw_exponent=color_map.idw_exponent,
        entries=[
            EntryModel(x=e.x, y=e.y, r=e.r, g=e.g, b=e.b, weight=e.weight)
            for e in color_map
        ],
    )


def from_model(model):
    cmap = ColorMap(idw_exponent=model.idw_exponent)
    for e in model.entries:
        cmap.append(ColorMapEntry.from_raw(e.x, e.y, e.r, e.g, e.b, e.weight))
    return cmap


def to_dict(color_map):
    return to_model(color_map).model_dump()


def from_dict(data):
    """Load a colour map from its raw dict form.

    Raises:
        pydantic.ValidationError: on missing fields or out-of-range values
    """
    return from_model(ColorMapModel.model_validate(data))


def to_json(color_map, indent=None):
    return to_model(color_map).model_dump_json(indent=indent)


def from_json(text):
    return from_model(ColorMapModel.model_validate_json(text))
