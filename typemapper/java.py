"""Java type mapping.

Lists render as ``java.util.List<T>`` and nullable return types as
``java.util.Optional<T>``. Java generics cannot take primitives, so a
primitive placed inside any generic is boxed (``int`` -> ``Integer``).
"""

from __future__ import annotations

from types import MappingProxyType

from .mapper import TypeMapper
from .model import MappingContext
from .types import TypeSyntax

JAVA_UTIL_LIST = "java.util.List"
JAVA_UTIL_OPTIONAL = "java.util.Optional"

JAVA_BOXED_TYPES = MappingProxyType({
    "byte": "Byte",
    "short": "Short",
    "int": "Integer",
    "long": "Long",
    "float": "Float",
    "double": "Double",
    "char": "Character",
    "boolean": "Boolean",
})

JAVA_SYNTAX = TypeSyntax(
    list_type=JAVA_UTIL_LIST,
    optional_type=JAVA_UTIL_OPTIONAL,
    bound_prefix="? extends ",
    open_bracket="<",
    close_bracket=">",
    primitives=frozenset(JAVA_BOXED_TYPES),
    boxed=JAVA_BOXED_TYPES,
)


class JavaTypeMapper(TypeMapper):
    language = "java"
    syntax = JAVA_SYNTAX

    def get_generics_string(
        self, context: MappingContext, generic_type: str, type_parameter: str,
    ) -> str:
        return super().get_generics_string(context, generic_type, self.syntax.box(type_parameter))

    def get_jackson_resolver_type_id_annotation(self, model_package_name: str) -> str:
        return (
            "com.fasterxml.jackson.databind.annotation.JsonTypeIdResolver("
            f"{model_package_name}GraphqlJacksonTypeIdResolver.class)"
        )
