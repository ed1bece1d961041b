"""Shared runtime utilities reused across ConvNexus layers."""

from .config import ConfigBase
from .conv import IntOrTuple, conv1d, conv2d, conv3d, conv_general, dimension_numbers, to_tuple
from .padding import circular_pad, circular_pad2d
from .protocols import Describable, UnaryLayer

__all__ = [
    "ConfigBase",
    "IntOrTuple",
    "conv1d",
    "conv2d",
    "conv3d",
    "conv_general",
    "dimension_numbers",
    "to_tuple",
    "circular_pad",
    "circular_pad2d",
    "Describable",
    "UnaryLayer",
]
