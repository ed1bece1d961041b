"""Neural network building blocks for ConvNexus.

- conv: Conv1d, Conv2d (zero or circular padding), Conv3d
- norm: RMSNorm

All layers share one call signature: ``layer(x) -> y``.
"""

from .conv import Conv1d, Conv2d, Conv3d, PaddingMode
from .norm import RMSNorm

__all__ = [
    "Conv1d",
    "Conv2d",
    "Conv3d",
    "PaddingMode",
    "RMSNorm",
]
