"""Configuration helpers for ConvNexus layers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T", bound="ConfigBase")


@dataclass
class ConfigBase:
    """Dataclass mixin with validation and dict serialization helpers.

    Subclasses override :meth:`validate` to reject bad values at construction
    time instead of deep inside a forward pass.
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raises ``ValueError`` when a field holds an unusable value."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown {cls.__name__} fields: {unknown}")
        return cls(**data)
