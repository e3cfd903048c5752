"""Base class for per-language type mapping strategies.

A mapper turns a resolved type name into its final rendered form, either for
a field declaration (``wrap_into_list``) or for the direct return type of a
query, mutation or subscription (``wrap_api_return_type_if_required``).

Subclasses supply a ``TypeSyntax`` and the language-specific annotation
helpers; the wrapping rules themselves are shared.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .model import GraphQLOperation, MappingContext, NamedDefinition, is_not_blank
from .types import (
    ListType,
    OptionalType,
    TypeRef,
    TypeSyntax,
    parse_type,
    render_type,
)


class TypeMapper(ABC):
    """Maps GraphQL field types to target-language type names."""

    language: str = ""
    # List forms of other languages that must never be wrapped as optional
    foreign_list_types: tuple[str, ...] = ()

    def __init__(self, value_mapper: Any = None) -> None:
        self._value_mapper = value_mapper

    @property
    @abstractmethod
    def syntax(self) -> TypeSyntax:
        """Lexical conventions of the target language."""

    @property
    def value_mapper(self) -> Any:
        """Delegate that renders default and example values for this language."""
        return self._value_mapper

    # -- lexical helpers ---------------------------------------------------

    def parse(self, type_name: str) -> TypeRef:
        return parse_type(type_name, self.syntax)

    def render(self, type_ref: TypeRef) -> str:
        return render_type(type_ref, self.syntax)

    def is_primitive(self, type_name: str | None) -> bool:
        return type_name in self.syntax.primitives

    def is_collection(self, type_name: str) -> bool:
        if isinstance(self.parse(type_name), ListType):
            return True
        return any(type_name.startswith(prefix) for prefix in self.foreign_list_types)

    def is_optional(self, type_name: str) -> bool:
        return isinstance(self.parse(type_name), OptionalType)

    def get_generic_parameter(self, type_name: str) -> str:
        """Return the type argument of a list or optional form.

        Any other name is returned unchanged.
        """
        type_ref = self.parse(type_name)
        if isinstance(type_ref, (ListType, OptionalType)):
            return self.render(type_ref.inner)
        return type_name

    # -- wrapping ----------------------------------------------------------

    def get_generics_string(
        self, context: MappingContext, generic_type: str, type_parameter: str,
    ) -> str:
        """Parameterize ``generic_type`` (a name or a ``%s`` template) with ``type_parameter``."""
        return self.syntax.generic(generic_type, type_parameter)

    def wrap_into_list(self, context: MappingContext, type_name: str, mandatory: bool) -> str:
        return self.get_generics_string(context, self.syntax.list_type, type_name)

    def wrap_super_type_into_list(
        self, context: MappingContext, type_name: str, mandatory: bool,
    ) -> str:
        return self.get_generics_string(
            context, self.syntax.list_type, self.syntax.bound_prefix + self.syntax.box(type_name),
        )

    def wrap_into_optional(self, context: MappingContext, type_name: str) -> str:
        return self.get_generics_string(context, self.syntax.optional_type, type_name)

    def wrap_api_return_type_if_required(
        self,
        context: MappingContext,
        definition: NamedDefinition,
        parent_operation: str,
    ) -> str:
        """Compute the return type of a query, mutation or subscription field.

        Rules, in order:
          1. subscription with ``subscription_return_type`` set: wrap and stop
          2. nullable return with optional wrapping enabled: wrap in the
             optional type unless already a list or an optional
          3. list with ``api_return_list_type`` set: swap the list type
          4. ``api_return_type`` set: wrap the whole type
          5. otherwise keep the type, using a primitive where one is mapped
        """
        computed = definition.name
        if (parent_operation.upper() == GraphQLOperation.SUBSCRIPTION.value
                and is_not_blank(context.subscription_return_type)):
            return self.get_generics_string(context, context.subscription_return_type, computed)

        if (context.use_optional_for_nullable_return_types
                and not definition.mandatory
                and not self.is_collection(computed)
                and not self.is_optional(computed)):
            computed = self.wrap_into_optional(context, computed)

        if is_not_blank(context.api_return_list_type):
            type_ref = self.parse(computed)
            if isinstance(type_ref, ListType):
                return self.get_generics_string(
                    context, context.api_return_list_type, self.render(type_ref.inner),
                )

        if is_not_blank(context.api_return_type):
            return self.get_generics_string(context, context.api_return_type, computed)

        return self.get_type_considering_primitive(context, definition, computed)

    def get_type_considering_primitive(
        self,
        context: MappingContext,
        definition: NamedDefinition,
        computed_type_name: str,
    ) -> str:
        """Use the primitive mapped for a mandatory GraphQL type, if there is one."""
        graphql_type_name = definition.graphql_type_name
        if definition.mandatory and definition.primitive_can_be_used and graphql_type_name:
            possibly_primitive = context.custom_types_mapping.get(graphql_type_name + "!")
            if self.is_primitive(possibly_primitive):
                return possibly_primitive
        return computed_type_name

    # -- annotations -------------------------------------------------------

    def add_model_validation_annotation_for_type(self, type_name: str) -> bool:
        return not self.is_primitive(type_name)

    def get_additional_annotations(self, context: MappingContext, type_name: str) -> list[str]:
        return []

    @abstractmethod
    def get_jackson_resolver_type_id_annotation(self, model_package_name: str) -> str:
        """Annotation pointing Jackson at the generated type id resolver."""
