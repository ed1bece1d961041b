"""Channels-last convolution layers.

Layers store kernels as ``[out_channels, *kernel, in_channels / groups]`` and
expect inputs laid out as ``[batch, *spatial, channels]``:
- Conv1d: [batch, length, channels]
- Conv2d: [batch, height, width, channels], with zero or circular padding
- Conv3d: [batch, depth, height, width, channels]
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional, Tuple, Union

import jax
import jax.numpy as jnp
import flax.nnx as nnx

from convnexus.core import IntOrTuple, circular_pad2d, conv_general, to_tuple

Array = jax.Array

logger = logging.getLogger(__name__)


class PaddingMode(str, Enum):
    """How Conv2d fills the border before convolving."""

    ZEROS = "zeros"
    CIRCULAR = "circular"


def _check_positive(name: str, values: Tuple[int, ...]) -> None:
    if any(v < 1 for v in values):
        raise ValueError(f"{name} must be >= 1; got {values}")


class _ConvNd(nnx.Module):
    """Parameter setup and forward pass shared by Conv1d/2d/3d."""

    ndim = 0

    def __init__(
        self,
        in_channels: int,
        out_channels: int,
        kernel_size: IntOrTuple,
        *,
        stride: IntOrTuple = 1,
        padding: IntOrTuple = 0,
        dilation: IntOrTuple = 1,
        groups: int = 1,
        bias: bool = True,
        rngs: nnx.Rngs,
    ):
        if groups < 1:
            raise ValueError(f"groups must be >= 1; got {groups}")
        if in_channels % groups != 0:
            raise ValueError(
                f"in_channels ({in_channels}) must be divisible by groups ({groups})"
            )

        self.in_channels = in_channels
        self.out_channels = out_channels
        self.kernel_size = to_tuple(kernel_size, self.ndim, name="kernel_size")
        self.stride = to_tuple(stride, self.ndim, name="stride")
        self.padding = to_tuple(padding, self.ndim, name="padding")
        self.dilation = to_tuple(dilation, self.ndim, name="dilation")
        self.groups = groups

        _check_positive("kernel_size", self.kernel_size)
        _check_positive("stride", self.stride)
        _check_positive("dilation", self.dilation)
        if any(p < 0 for p in self.padding):
            raise ValueError(f"padding must be >= 0; got {self.padding}")

        # Fan-in counts every input channel, not just one group's share.
        scale = math.sqrt(1.0 / (in_channels * math.prod(self.kernel_size)))
        shape = (out_channels, *self.kernel_size, in_channels // groups)
        self.weight = nnx.Param(
            jax.random.uniform(rngs.params(), shape, minval=-scale, maxval=scale)
        )
        self.bias: Optional[nnx.Param] = (
            nnx.Param(jnp.zeros((out_channels,))) if bias else None
        )
        logger.debug(
            "%s weight=%s scale=%.4g bias=%s", type(self).__name__, shape, scale, bias
        )

    def _convolve(self, x: Array, padding: Tuple[int, ...]) -> Array:
        y = conv_general(
            x,
            self.weight.value,
            stride=self.stride,
            padding=padding,
            dilation=self.dilation,
            groups=self.groups,
        )
        if self.bias is not None:
            y = y + self.bias.value
        return y

    def __call__(self, x: Array) -> Array:
        return self._convolve(x, self.padding)

    def _describe_fields(self) -> str:
        return (
            f"{self.in_channels}, {self.out_channels}, kernel_size={self.kernel_size}, "
            f"stride={self.stride}, padding={self.padding}, dilation={self.dilation}, "
            f"groups={self.groups}, bias={self.bias is not None}"
        )

    def describe(self) -> str:
        """One-line summary of the layer's hyperparameters."""
        return f"{type(self).__name__}({self._describe_fields()})"


class Conv1d(_ConvNd):
    """1D convolution over a multi-channel sequence.

    Args:
        in_channels: Number of input channels ``C`` of an ``[N, L, C]`` input.
        out_channels: Number of output channels.
        kernel_size: Size of the convolution filters.
        stride: Stride when applying the filter.
        padding: Zero padding added to both ends of the sequence.
        dilation: Spacing between kernel elements.
        groups: Number of channel groups; must divide ``in_channels``.
        bias: Whether to add a learnable bias (initialized to zero).
        rngs: Random number generators for weight initialization.
    """

    ndim = 1


class Conv2d(_ConvNd):
    """2D convolution over a multi-channel image.

    Takes the same arguments as :class:`Conv1d` with per-axis ``(height, width)``
    values, plus ``padding_mode``. With ``PaddingMode.CIRCULAR`` the input is
    wrapped by ``padding`` on each side and then convolved without further
    padding.
    """

    ndim = 2

    def __init__(
        self,
        in_channels: int,
        out_channels: int,
        kernel_size: IntOrTuple,
        *,
        stride: IntOrTuple = 1,
        padding: IntOrTuple = 0,
        dilation: IntOrTuple = 1,
        groups: int = 1,
        bias: bool = True,
        padding_mode: Union[PaddingMode, str] = PaddingMode.ZEROS,
        rngs: nnx.Rngs,
    ):
        self.padding_mode = PaddingMode(padding_mode)
        super().__init__(
            in_channels,
            out_channels,
            kernel_size,
            stride=stride,
            padding=padding,
            dilation=dilation,
            groups=groups,
            bias=bias,
            rngs=rngs,
        )

    def __call__(self, x: Array) -> Array:
        """Forward pass.

        Args:
            x: Input tensor of shape [batch, height, width, in_channels]

        Returns:
            Output tensor of shape [batch, out_height, out_width, out_channels]
        """
        if self.padding_mode is PaddingMode.CIRCULAR:
            return self._convolve(circular_pad2d(x, self.padding), (0, 0))
        return self._convolve(x, self.padding)

    def describe(self) -> str:
        return (
            f"{type(self).__name__}({self._describe_fields()}, "
            f"padding_mode={self.padding_mode.value})"
        )


class Conv3d(_ConvNd):
    """3D convolution over a multi-channel volume laid out [N, D, H, W, C].

    Takes the same arguments as :class:`Conv1d` with per-axis
    ``(depth, height, width)`` values.
    """

    ndim = 3
