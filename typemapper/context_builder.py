"""Build the jinja2 template context for a preview of resolved field types.

Each definition is a dict like::

    {"name": "users", "type": "User", "graphqlType": "User",
     "mandatory": false, "list": true, "operation": "QUERY"}

``operation`` marks the field as the direct return of a query, mutation or
subscription; those go through the API return-type rules, plain model fields
only get list wrapping.
"""

from __future__ import annotations

from typing import Any

from .mapper import TypeMapper
from .model import MappingContext, NamedDefinition

# Emitted on mandatory model fields of non-primitive type
VALIDATION_ANNOTATION = "javax.validation.constraints.NotNull"


def _base_type_name(
    mapper: TypeMapper, context: MappingContext, definition: dict[str, Any],
) -> str:
    type_name = definition["type"]
    if definition.get("list", False):
        mandatory = definition.get("mandatory", False)
        return mapper.wrap_into_list(context, type_name, mandatory)
    return type_name


def _annotations(
    mapper: TypeMapper,
    context: MappingContext,
    definition: dict[str, Any],
    type_name: str,
) -> list[str]:
    annotations: list[str] = []
    if (definition.get("mandatory", False)
            and not definition.get("operation")
            and mapper.add_model_validation_annotation_for_type(type_name)):
        annotations.append(VALIDATION_ANNOTATION)
    annotations.extend(mapper.get_additional_annotations(context, definition["type"]))
    return annotations


def build_field(
    mapper: TypeMapper, context: MappingContext, definition: dict[str, Any],
) -> dict[str, Any]:
    """Resolve one field definition to its rendered type and annotations."""
    type_name = _base_type_name(mapper, context, definition)
    operation = definition.get("operation")

    if operation:
        named = NamedDefinition(
            name=type_name,
            mandatory=definition.get("mandatory", False),
            graphql_type_name=definition.get("graphqlType"),
        )
        type_name = mapper.wrap_api_return_type_if_required(context, named, operation)

    return {
        "name": definition["name"],
        "type": type_name,
        "operation": operation.lower() if operation else None,
        "annotations": _annotations(mapper, context, definition, type_name),
    }


def build_context(
    mapper: TypeMapper, context: MappingContext, definitions: list[dict[str, Any]],
) -> dict[str, Any]:
    """Build the full template context for preview.txt.j2."""
    fields = [build_field(mapper, context, definition) for definition in definitions]
    return {
        "language": mapper.language,
        "fields": fields,
        "field_count": len(fields),
    }
