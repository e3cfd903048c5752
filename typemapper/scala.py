"""Scala type mapping.

Lists render as ``Seq[T]`` and nullable return types as ``Option[T]``. The
fully qualified ``scala.Seq`` / ``scala.Option`` forms are recognised on input
and kept as written. Java list types coming from custom type mappings are
treated as collections too, so they never get an ``Option`` around them.
"""

from __future__ import annotations

from .java import JAVA_UTIL_LIST
from .mapper import TypeMapper
from .model import MappingContext, is_not_blank
from .types import TypeSyntax

SCALA_LIST = "Seq"
SCALA_OPTION = "Option"

SCALA_PRIMITIVE_TYPES = frozenset({
    "Byte", "Short", "Int", "Long", "Float", "Double", "Char", "Boolean",
})

SCALA_SYNTAX = TypeSyntax(
    list_type=SCALA_LIST,
    optional_type=SCALA_OPTION,
    bound_prefix="_ <: ",
    list_aliases=("scala.Seq",),
    optional_aliases=("scala.Option",),
    primitives=SCALA_PRIMITIVE_TYPES,
)


class ScalaTypeMapper(TypeMapper):
    language = "scala"
    syntax = SCALA_SYNTAX
    foreign_list_types = (JAVA_UTIL_LIST,)

    def get_jackson_resolver_type_id_annotation(self, model_package_name: str) -> str:
        return (
            "com.fasterxml.jackson.databind.annotation.JsonTypeIdResolver(classOf["
            f"{model_package_name}GraphqlJacksonTypeIdResolver])"
        )

    def get_additional_annotations(self, context: MappingContext, type_name: str) -> list[str]:
        """Annotate enums that need their generated ``TypeRefer`` class for Jackson."""
        class_name = context.model_class_name(type_name)
        if class_name not in context.enum_self_import_set:
            return []

        model_package = context.model_package()
        prefix = f"{model_package}." if is_not_blank(model_package) else ""
        return [
            "com.fasterxml.jackson.module.scala.JsonScalaEnumeration("
            f"classOf[{prefix}{class_name}TypeRefer])"
        ]
