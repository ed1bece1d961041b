"""Normalization layers."""

from __future__ import annotations

import logging
import math

import jax
import jax.numpy as jnp
import flax.nnx as nnx

Array = jax.Array

logger = logging.getLogger(__name__)


class RMSNorm(nnx.Module):
    """Root Mean Square Layer Normalization.

    Normalizes over the last axis by the RMS magnitude, without mean-centering,
    and scales by a learned per-feature weight.

    Args:
        dims: Size of the last (feature) axis.
        eps: Added to the mean square before the reciprocal square root.
        rngs: Random number generators (unused, for API consistency).
    """

    def __init__(self, dims: int, *, eps: float = 1e-5, rngs: nnx.Rngs):
        if dims < 1:
            raise ValueError(f"dims must be >= 1; got {dims}")
        self.eps = eps
        self.weight = nnx.Param(jnp.ones((dims,)))
        logger.debug("RMSNorm dims=%d eps=%g", dims, eps)

    def __call__(self, x: Array) -> Array:
        """Apply RMS normalization.

        Args:
            x: Input tensor of shape [..., dims]

        Returns:
            Normalized tensor of same shape.
        """
        # Scale by 1/sqrt(N) before squaring so the sum is already the mean;
        # large inputs then underflow (absorbed by eps) instead of overflowing.
        scale = 1.0 / math.sqrt(x.shape[-1])
        mean_sq = jnp.sum(jnp.square(x * scale), axis=-1, keepdims=True)
        return self.weight.value * x * jax.lax.rsqrt(mean_sq + self.eps)

    def describe(self) -> str:
        """One-line summary of the layer's hyperparameters."""
        return f"RMSNorm(dims={self.weight.value.shape[0]}, eps={self.eps})"
