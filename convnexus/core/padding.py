"""Circular (wrap-around) padding for channels-last tensors."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import jax
import jax.numpy as jnp

Array = jax.Array

logger = logging.getLogger(__name__)


def _axis_slice(ndim: int, axis: int, start: int, stop: int) -> Tuple[slice, ...]:
    index = [slice(None)] * ndim
    index[axis] = slice(start, stop)
    return tuple(index)


def circular_pad(x: Array, padding: Sequence[int], axes: Sequence[int]) -> Array:
    """Wraps each axis in ``axes`` by the matching amount in ``padding``.

    Axes are padded in order, so later axes see the already padded tensor and
    the corners are filled with the diagonally opposite values.

    Args:
        x: Input tensor of any rank.
        padding: Non-negative wrap amount per axis.
        axes: Axes to pad, same length as ``padding``.
    Returns:
        Tensor whose padded axes grew by ``2 * pad``.
    """

    if len(padding) != len(axes):
        raise ValueError(f"padding {tuple(padding)} and axes {tuple(axes)} must have the same length")

    y = x
    for pad, axis in zip(padding, axes):
        size = y.shape[axis]
        if pad < 0:
            raise ValueError(f"circular padding must be non-negative; got {pad} for axis {axis}")
        if pad > size:
            raise ValueError(
                f"circular padding {pad} exceeds size {size} of axis {axis}; "
                "wrapping more than one period is not supported"
            )
        if pad == 0:
            continue
        head = y[_axis_slice(y.ndim, axis, 0, pad)]
        tail = y[_axis_slice(y.ndim, axis, size - pad, size)]
        y = jnp.concatenate([tail, y, head], axis=axis)
    return y


def circular_pad2d(x: Array, padding: Tuple[int, int]) -> Array:
    """Circularly pads the height and width axes of an NHWC tensor.

    Args:
        x: Tensor shaped [batch, height, width, channels].
        padding: ``(pad_h, pad_w)``.
    Returns:
        Tensor shaped [batch, height + 2 * pad_h, width + 2 * pad_w, channels],
        or ``x`` itself when both pads are zero.
    """

    if x.ndim != 4:
        raise ValueError(f"circular_pad2d expects a rank-4 NHWC tensor; got shape {x.shape}")
    pad_h, pad_w = padding
    if pad_h == 0 and pad_w == 0:
        return x
    logger.debug("circular pad %s -> pad=(%d, %d)", x.shape, pad_h, pad_w)
    return circular_pad(x, (pad_h, pad_w), axes=(1, 2))
