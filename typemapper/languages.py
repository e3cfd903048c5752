"""Select a type mapper for the configured target language."""

from __future__ import annotations

from typing import Any

from .java import JavaTypeMapper
from .mapper import TypeMapper
from .scala import ScalaTypeMapper

_MAPPERS: dict[str, type[TypeMapper]] = {
    "java": JavaTypeMapper,
    "scala": ScalaTypeMapper,
}


def supported_languages() -> list[str]:
    return sorted(_MAPPERS)


def get_type_mapper(language: str, value_mapper: Any = None) -> TypeMapper:
    """Instantiate the mapper registered for ``language`` (case-insensitive)."""
    mapper_class = _MAPPERS.get(language.lower())
    if mapper_class is None:
        raise ValueError(
            f"Unsupported language {language!r}; expected one of: "
            + ", ".join(supported_languages())
        )
    return mapper_class(value_mapper)
