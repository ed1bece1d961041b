"""Configuration containers for ConvNexus layers.

Each config mirrors the keyword arguments of its layer so layers can be built
from plain dicts (see :func:`convnexus.registry.create_layer`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence, Union

from convnexus.core import ConfigBase, to_tuple

IntOrSeq = Union[int, Sequence[int]]


@dataclass
class ConvConfig(ConfigBase):
    """Fields shared by every convolution config."""

    in_channels: int = 1
    out_channels: int = 1
    kernel_size: IntOrSeq = 3
    stride: IntOrSeq = 1
    padding: IntOrSeq = 0
    dilation: IntOrSeq = 1
    groups: int = 1
    bias: bool = True

    ndim: ClassVar[int] = 0

    def validate(self) -> None:
        if self.groups < 1 or self.in_channels % self.groups != 0:
            raise ValueError(
                f"in_channels ({self.in_channels}) must be divisible by groups ({self.groups})"
            )
        for name in ("kernel_size", "stride", "padding", "dilation"):
            to_tuple(getattr(self, name), self.ndim, name=name)


@dataclass
class Conv1dConfig(ConvConfig):
    ndim: ClassVar[int] = 1


@dataclass
class Conv2dConfig(ConvConfig):
    padding_mode: str = "zeros"

    ndim: ClassVar[int] = 2

    def validate(self) -> None:
        super().validate()
        if self.padding_mode not in ("zeros", "circular"):
            raise ValueError(f"padding_mode must be 'zeros' or 'circular'; got {self.padding_mode!r}")


@dataclass
class Conv3dConfig(ConvConfig):
    ndim: ClassVar[int] = 3


@dataclass
class RMSNormConfig(ConfigBase):
    """Configuration for :class:`convnexus.modules.RMSNorm`."""

    dims: int = 1
    eps: float = 1e-5

    def validate(self) -> None:
        if self.dims < 1:
            raise ValueError(f"dims must be >= 1; got {self.dims}")
        if self.eps < 0:
            raise ValueError(f"eps must be >= 0; got {self.eps}")
