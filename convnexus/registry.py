"""Name-based layer registry for building layers from configs."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Tuple, Type, Union

import flax.nnx as nnx

from convnexus.config import Conv1dConfig, Conv2dConfig, Conv3dConfig, RMSNormConfig
from convnexus.core import ConfigBase
from convnexus.modules import Conv1d, Conv2d, Conv3d, RMSNorm

logger = logging.getLogger(__name__)

LayerEntry = Tuple[Type[nnx.Module], Type[ConfigBase]]

LAYER_REGISTRY: Dict[str, LayerEntry] = {
    "conv1d": (Conv1d, Conv1dConfig),
    "conv2d": (Conv2d, Conv2dConfig),
    "conv3d": (Conv3d, Conv3dConfig),
    "rmsnorm": (RMSNorm, RMSNormConfig),
}


def register_layer(name: str, layer_cls: Type[nnx.Module], config_cls: Type[ConfigBase]) -> None:
    """Adds a layer under ``name``; refuses to overwrite an existing entry."""
    if name in LAYER_REGISTRY:
        raise ValueError(f"Layer '{name}' is already registered")
    LAYER_REGISTRY[name] = (layer_cls, config_cls)


def create_layer(
    name: str,
    config: Union[ConfigBase, Mapping[str, Any]],
    *,
    rngs: nnx.Rngs,
) -> nnx.Module:
    """Builds the layer registered under ``name`` from a config or a plain dict.

    Args:
        name: Registry key, e.g. "conv2d" or "rmsnorm".
        config: Matching config instance, or a dict accepted by its ``from_dict``.
        rngs: Random number generators for parameter initialization.
    Returns:
        The constructed layer.
    """
    if name not in LAYER_REGISTRY:
        raise KeyError(f"Unknown layer '{name}'. Choose from: {sorted(LAYER_REGISTRY)}")
    layer_cls, config_cls = LAYER_REGISTRY[name]

    if isinstance(config, Mapping):
        config = config_cls.from_dict(dict(config))
    elif not isinstance(config, config_cls):
        raise TypeError(
            f"Layer '{name}' expects {config_cls.__name__}; got {type(config).__name__}"
        )

    logger.debug("create_layer %s from %s", name, config)
    return layer_cls(**config.to_dict(), rngs=rngs)


__all__ = [
    "LAYER_REGISTRY",
    "create_layer",
    "register_layer",
]
