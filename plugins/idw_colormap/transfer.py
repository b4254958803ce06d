"""
GPU Transfer Encoding

Packs a ColorMap into a flat structured buffer for a parallel evaluator
(shader or kernel). Each record mirrors the GPU-side struct:

    struct BufferEntry { float4 color; float2 position; };   // 24 bytes

Colours are channel / 255 with the weight in the fourth component.
The buffer can never be zero-sized, so an empty map is sent as a single
magenta record at (0, 0) with count = 0. The evaluator must treat
count = 0 as "return the sentinel". The IDW exponent travels alongside
as a separate scalar.

evaluate_packet() is a torch reference of that kernel, used to check
numerical parity against idw.colors_at.
"""

import logging
from dataclasses import dataclass

import numpy as np
import torch

from .idw import EMPTY_COLOR, EPSILON, entry_arrays

logger = logging.getLogger(__name__)

BUFFER_DTYPE = np.dtype([
    ("color", np.float32, (4,)),
    ("position", np.float32, (2,)),
])
BUFFER_STRIDE = BUFFER_DTYPE.itemsize  # 4 * 6 bytes


@dataclass(frozen=True)
class TransferPacket:
    """Everything the external evaluator needs for one frame.

    Attributes:
        buffer: structured array of BUFFER_DTYPE, length max(1, count)
        count: true number of entries (0 means use the sentinel)
        idw_exponent: falloff exponent to bind alongside the buffer
    """
    buffer: np.ndarray
    count: int
    idw_exponent: float

    def as_tensor(self, device=None):
        """Buffer as an (N, 6) float32 tensor: r, g, b, weight, x, y."""
        flat = np.ascontiguousarray(self.buffer).view(np.float32).reshape(-1, 6)
        return torch.from_numpy(flat.copy()).to(device)

    def tobytes(self):
        return self.buffer.tobytes()


def encode(color_map):
    """Encode a colour map into a TransferPacket.

    Returns:
        TransferPacket with max(1, len(color_map)) records
    """
    count = len(color_map)
    buffer = np.zeros(max(1, count), dtype=BUFFER_DTYPE)
    if count == 0:
        buffer["color"][0] = EMPTY_COLOR
        buffer["position"][0] = (0.0, 0.0)
    else:
        positions, rgb, weights = entry_arrays(color_map)
        buffer["color"][:, :3] = rgb
        buffer["color"][:, 3] = weights
        buffer["position"] = positions
    logger.debug("Encoded %d entries (%d records, %d bytes)",
                 count, len(buffer), buffer.nbytes)
    return TransferPacket(buffer=buffer, count=count,
                          idw_exponent=float(color_map.idw_exponent))


def evaluate_packet(packet, width, height, device=None):
    """Evaluate a packet over a width x height pixel grid with torch.

    Pixel (x, y) samples position (x / (width - 1), y / (height - 1)).

    Returns:
        (height, width, 4) float32 tensor of normalized colours
    """
    if packet.count == 0:
        sentinel = torch.tensor(EMPTY_COLOR, dtype=torch.float32, device=device)
        return sentinel.expand(height, width, 4).clone()

    records = packet.as_tensor(device)[:packet.count]
    color = records[:, 0:4]
    pos = records[:, 4:6]

    ys = torch.linspace(0.0, 1.0, height, device=device)
    xs = torch.linspace(0.0, 1.0, width, device=device)
    grid_y, grid_x = torch.meshgrid(ys, xs, indexing="ij")
    query = torch.stack((grid_x, grid_y), dim=-1)  # (H, W, 2)

    diff = query[:, :, None, :] - pos  # (H, W, N, 2)
    d_sq = (diff * diff).sum(dim=-1) + EPSILON
    if packet.idw_exponent != 2:
        d_sq = torch.pow(d_sq, packet.idw_exponent * 0.5)
    d_sq = d_sq + EPSILON
    weight = (1.0 / d_sq) * color[:, 3]

    opaque = torch.cat((color[:, :3], torch.ones_like(color[:, 3:])), dim=-1)
    numerator = weight @ opaque
    denominator = weight.sum(dim=-1, keepdim=True)
    return numerator / denominator
