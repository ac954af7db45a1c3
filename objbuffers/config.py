# objbuffers/config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar

from .model import Vec3

E = TypeVar("E", bound=Enum)


class AttributeMode(Enum):
    """Which per-corner attribute feeds the vertex color channel."""
    NONE = "none"
    TEXCOORD = "texcoord"
    NORMAL = "normal"


class QuadMode(Enum):
    TESSELLATE = "tessellate"  # quads drawn as two outlined triangles, diagonal included
    KEEP = "keep"              # quads keep their 4 original edges


class EmissionRule(Enum):
    TRIANGULATE = "triangulate"
    WIREFRAME_TESSELLATE = "wireframe_tessellate"
    WIREFRAME_KEEP = "wireframe_keep"

    @classmethod
    def for_quad_mode(cls, quad_mode: QuadMode) -> "EmissionRule":
        if quad_mode is QuadMode.KEEP:
            return cls.WIREFRAME_KEEP
        return cls.WIREFRAME_TESSELLATE

    @property
    def quad_mode(self) -> Optional[QuadMode]:
        if self is EmissionRule.WIREFRAME_KEEP:
            return QuadMode.KEEP
        if self is EmissionRule.WIREFRAME_TESSELLATE:
            return QuadMode.TESSELLATE
        return None


DEFAULT_FALLBACK_COLOR: Vec3 = (1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ConversionOptions:
    rule: EmissionRule = EmissionRule.TRIANGULATE
    attribute: AttributeMode = AttributeMode.TEXCOORD
    fallback_color: Vec3 = DEFAULT_FALLBACK_COLOR

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "ConversionOptions":
        """Merge a plain mapping (e.g. loaded from JSON) over the defaults.

        Enum values may be given by value or name, case-insensitively::

            ConversionOptions.from_dict({"rule": "wireframe_keep", "attribute": "normal"})
        """
        unknown = set(config) - {"rule", "attribute", "fallback_color"}
        if unknown:
            raise ValueError(f"Unknown conversion option(s): {', '.join(sorted(unknown))}")

        opts = DEFAULT_OPTIONS
        if config.get("rule") is not None:
            opts = replace(opts, rule=_coerce_enum(EmissionRule, config["rule"]))
        if config.get("attribute") is not None:
            opts = replace(opts, attribute=_coerce_enum(AttributeMode, config["attribute"]))
        if config.get("fallback_color") is not None:
            color = tuple(float(c) for c in config["fallback_color"])
            if len(color) != 3:
                raise ValueError("fallback_color must have exactly 3 components")
            opts = replace(opts, fallback_color=color)  # type: ignore[arg-type]
        return opts

    def to_dict(self) -> dict:
        return {
            "rule": self.rule.value,
            "attribute": self.attribute.value,
            "fallback_color": list(self.fallback_color),
        }


DEFAULT_OPTIONS = ConversionOptions()


def _coerce_enum(enum_cls: Type[E], value: Any) -> E:
    if isinstance(value, enum_cls):
        return value
    key = str(value).strip().lower()
    for member in enum_cls:
        if member.value == key or member.name.lower() == key:
            return member
    choices = ", ".join(m.value for m in enum_cls)
    raise ValueError(f"Invalid {enum_cls.__name__}: {value!r} (expected one of: {choices})")
