"""Inputs to type mapping: generation options and resolved field types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class GraphQLOperation(str, Enum):
    """Parent construct of an operation return type."""

    QUERY = "QUERY"
    MUTATION = "MUTATION"
    SUBSCRIPTION = "SUBSCRIPTION"


def is_not_blank(value: str | None) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True)
class NamedDefinition:
    """A resolved field type, before any wrapping.

    ``name`` is the target-language type name (it may already be a list form
    such as ``Seq[User]``). ``graphql_type_name`` is the schema type it came
    from and is only needed to look up primitive overrides in
    ``MappingContext.custom_types_mapping``.
    """

    name: str
    mandatory: bool = False
    graphql_type_name: str | None = None
    primitive_can_be_used: bool = True


@dataclass(frozen=True)
class MappingContext:
    """Generation options read by the type mappers. Never mutated during a run."""

    generated_language: str = "scala"
    use_optional_for_nullable_return_types: bool = False
    subscription_return_type: str | None = None
    api_return_list_type: str | None = None
    api_return_type: str | None = None
    model_name_prefix: str | None = None
    model_name_suffix: str | None = None
    enum_self_import_set: frozenset[str] = frozenset()
    package_name: str | None = None
    model_package_name: str | None = None
    # GraphQL type ("Int!", "DateTime") -> target type
    custom_types_mapping: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "enum_self_import_set", frozenset(self.enum_self_import_set))
        object.__setattr__(
            self, "custom_types_mapping", MappingProxyType(dict(self.custom_types_mapping)),
        )

    def model_package(self) -> str | None:
        """Package that generated model classes live in."""
        if is_not_blank(self.model_package_name):
            return self.model_package_name
        return self.package_name

    def model_class_name(self, type_name: str) -> str:
        """Apply the configured model name prefix and suffix."""
        return f"{self.model_name_prefix or ''}{type_name}{self.model_name_suffix or ''}"
