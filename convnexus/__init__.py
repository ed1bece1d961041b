"""ConvNexus: channels-last convolution and normalization layers in JAX.

Built on Flax NNX modules:
- Conv1d / Conv2d / Conv3d with stride, padding, dilation and groups
- Circular (wrap-around) padding for Conv2d
- RMSNorm with overflow-safe mean-square accumulation

Example:
    import flax.nnx as nnx
    from convnexus import Conv2d, RMSNorm

    conv = Conv2d(3, 16, 3, padding=1, padding_mode="circular", rngs=nnx.Rngs(0))
    norm = RMSNorm(16, rngs=nnx.Rngs(0))
    y = norm(conv(images))  # images: [batch, height, width, 3]
"""

from convnexus.core import (
    ConfigBase,
    Describable,
    UnaryLayer,
    circular_pad,
    circular_pad2d,
    conv1d,
    conv2d,
    conv3d,
)

from convnexus.modules import Conv1d, Conv2d, Conv3d, PaddingMode, RMSNorm

from convnexus.config import (
    ConvConfig,
    Conv1dConfig,
    Conv2dConfig,
    Conv3dConfig,
    RMSNormConfig,
)

from convnexus.registry import LAYER_REGISTRY, create_layer, register_layer

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigBase",
    "Describable",
    "UnaryLayer",
    "circular_pad",
    "circular_pad2d",
    "conv1d",
    "conv2d",
    "conv3d",

    # Layers
    "Conv1d",
    "Conv2d",
    "Conv3d",
    "PaddingMode",
    "RMSNorm",

    # Configs
    "ConvConfig",
    "Conv1dConfig",
    "Conv2dConfig",
    "Conv3dConfig",
    "RMSNormConfig",

    # Registry
    "LAYER_REGISTRY",
    "create_layer",
    "register_layer",
]
