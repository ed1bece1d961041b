"""Channels-last convolution primitives bound to ``jax.lax``.

All layers in ConvNexus store kernels as ``[out_channels, *kernel, in_channels / groups]``
and activations as ``[batch, *spatial, channels]``. These helpers translate that
layout into ``jax.lax.conv_general_dilated`` dimension numbers so the layers
never deal with XLA conventions directly.
"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import jax

Array = jax.Array
IntOrTuple = Union[int, Sequence[int]]

# Spatial axis labels by rank; the same letters are reused for the kernel so
# XLA pairs them up.
_SPATIAL_LABELS = {1: "W", 2: "HW", 3: "DHW"}


def to_tuple(value: IntOrTuple, ndim: int, *, name: str = "value") -> Tuple[int, ...]:
    """Broadcasts an int to ``ndim`` entries or checks a sequence has ``ndim`` entries."""

    if isinstance(value, int):
        return (value,) * ndim
    values = tuple(int(v) for v in value)
    if len(values) != ndim:
        raise ValueError(f"{name} must be an int or a sequence of {ndim} ints; got {value!r}")
    return values


def dimension_numbers(ndim: int) -> Tuple[str, str, str]:
    """Returns ``(lhs, rhs, out)`` layout strings for a channels-last ``ndim``-D conv."""

    if ndim not in _SPATIAL_LABELS:
        raise ValueError(f"Only 1D, 2D and 3D convolutions are supported; got ndim={ndim}")
    spatial = _SPATIAL_LABELS[ndim]
    return (f"N{spatial}C", f"O{spatial}I", f"N{spatial}C")


def conv_general(
    inputs: Array,
    weight: Array,
    *,
    stride: Sequence[int],
    padding: Sequence[int],
    dilation: Sequence[int],
    groups: int = 1,
) -> Array:
    """N-D channels-last convolution with symmetric zero padding.

    Args:
        inputs: Tensor shaped [batch, *spatial, in_channels].
        weight: Kernel shaped [out_channels, *kernel, in_channels / groups].
        stride: Per-axis window strides.
        padding: Per-axis zero padding applied to both sides.
        dilation: Per-axis kernel dilation.
        groups: Number of channel groups.
    Returns:
        Tensor shaped [batch, *out_spatial, out_channels].
    """

    ndim = weight.ndim - 2
    if inputs.ndim != ndim + 2:
        raise ValueError(
            f"Expected a rank-{ndim + 2} input for a {ndim}D convolution; got shape {inputs.shape}"
        )
    return jax.lax.conv_general_dilated(
        inputs,
        weight,
        window_strides=tuple(stride),
        padding=[(p, p) for p in padding],
        rhs_dilation=tuple(dilation),
        dimension_numbers=dimension_numbers(ndim),
        feature_group_count=groups,
    )


def conv1d(
    inputs: Array,
    weight: Array,
    *,
    stride: IntOrTuple = 1,
    padding: IntOrTuple = 0,
    dilation: IntOrTuple = 1,
    groups: int = 1,
) -> Array:
    """1D convolution over [batch, length, channels]."""

    return conv_general(
        inputs,
        weight,
        stride=to_tuple(stride, 1, name="stride"),
        padding=to_tuple(padding, 1, name="padding"),
        dilation=to_tuple(dilation, 1, name="dilation"),
        groups=groups,
    )


def conv2d(
    inputs: Array,
    weight: Array,
    *,
    stride: IntOrTuple = 1,
    padding: IntOrTuple = 0,
    dilation: IntOrTuple = 1,
    groups: int = 1,
) -> Array:
    """2D convolution over [batch, height, width, channels]."""

    return conv_general(
        inputs,
        weight,
        stride=to_tuple(stride, 2, name="stride"),
        padding=to_tuple(padding, 2, name="padding"),
        dilation=to_tuple(dilation, 2, name="dilation"),
        groups=groups,
    )


def conv3d(
    inputs: Array,
    weight: Array,
    *,
    stride: IntOrTuple = 1,
    padding: IntOrTuple = 0,
    dilation: IntOrTuple = 1,
    groups: int = 1,
) -> Array:
    """3D convolution over [batch, depth, height, width, channels]."""

    return conv_general(
        inputs,
        weight,
        stride=to_tuple(stride, 3, name="stride"),
        padding=to_tuple(padding, 3, name="padding"),
        dilation=to_tuple(dilation, 3, name="dilation"),
        groups=groups,
    )
