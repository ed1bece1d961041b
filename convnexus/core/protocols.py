"""Structural interfaces shared across ConvNexus layers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import jax

Array = jax.Array


@runtime_checkable
class UnaryLayer(Protocol):
    """Anything that maps one array to one array.

    Every layer in :mod:`convnexus.modules` satisfies this, which lets callers
    type heterogeneous stacks (lists, ``nnx.Sequential``) without a common base
    class beyond ``nnx.Module``.
    """

    def __call__(self, x: Array) -> Array:
        """Forward pass."""
        ...


@runtime_checkable
class Describable(Protocol):
    """Layers that can summarize their hyperparameters in one line."""

    def describe(self) -> str:
        ...
