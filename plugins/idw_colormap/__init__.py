"""
IDW Colour Maps

Scattered key colours on [0,1]^2 blended with inverse distance weighting,
with smooth morphing between maps and a flat buffer encoding for GPU
evaluators.

Examples
--------
>>> from idw_colormap import ColorMap, morph, encode
>>> a = ColorMap()
>>> a.add((0, 0), (255, 0, 0))
>>> a.add((1, 1), (0, 0, 255))
>>> a.color_at((0.5, 0.5))
(0.5, 0.0, 0.5, 1.0)
>>> packet = encode(a)
>>> packet.count, len(packet.buffer)
(2, 2)
"""

from .errors import (
    ColorMapError,
    OutOfRangeError,
    EmptyFieldError,
    AliasError,
)

from .entry import (
    ColorMapEntry,
    quantize_position,
    dequantize_position,
    POSITION_SCALE,
    CHANNEL_SCALE,
)

from .color_map import (
    ColorMap,
    DEFAULT_IDW_EXPONENT,
)

from .idw import (
    color_at,
    colors_at,
    to_color32,
    EMPTY_COLOR,
    EPSILON,
)

from .morph import (
    MorphWorkspace,
    deep_copy,
    deep_copy_into,
    morph,
    morph_into,
)

from .transfer import (
    BUFFER_DTYPE,
    TransferPacket,
    encode,
    evaluate_packet,
)

__all__ = [
    # Errors
    'ColorMapError',
    'OutOfRangeError',
    'EmptyFieldError',
    'AliasError',

    # Entries
    'ColorMapEntry',
    'quantize_position',
    'dequantize_position',
    'POSITION_SCALE',
    'CHANNEL_SCALE',

    # Maps
    'ColorMap',
    'DEFAULT_IDW_EXPONENT',

    # Evaluation
    'color_at',
    'colors_at',
    'to_color32',
    'EMPTY_COLOR',
    'EPSILON',

    # Copy / morph
    'MorphWorkspace',
    'deep_copy',
    'deep_copy_into',
    'morph',
    'morph_into',

    # GPU transfer
    'BUFFER_DTYPE',
    'TransferPacket',
    'encode',
    'evaluate_packet',
]
