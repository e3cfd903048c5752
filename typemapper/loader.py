"""Load generation options and field definitions from JSON.

Option keys use the generator's camelCase names, e.g.::

    {
        "generatedLanguage": "scala",
        "useOptionalForNullableReturnTypes": true,
        "apiReturnListType": "fs2.Stream",
        "enumImportItSelfInScala": ["Color"]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .model import MappingContext

# Option name -> MappingContext field
_OPTION_FIELDS: dict[str, str] = {
    "generatedLanguage": "generated_language",
    "useOptionalForNullableReturnTypes": "use_optional_for_nullable_return_types",
    "subscriptionReturnType": "subscription_return_type",
    "apiReturnListType": "api_return_list_type",
    "apiReturnType": "api_return_type",
    "modelNamePrefix": "model_name_prefix",
    "modelNameSuffix": "model_name_suffix",
    "enumImportItSelfInScala": "enum_self_import_set",
    "enumSelfImportSet": "enum_self_import_set",
    "packageName": "package_name",
    "modelPackageName": "model_package_name",
    "customTypesMapping": "custom_types_mapping",
}


def _read_json(path: Path) -> Any:
    with open(path) as f:
        return json.load(f)


def context_from_dict(options: dict[str, Any]) -> MappingContext:
    """Build a MappingContext from camelCase options."""
    unknown = sorted(set(options) - set(_OPTION_FIELDS))
    if unknown:
        raise ValueError(f"Unknown mapping options: {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for key, value in options.items():
        if value is None:
            continue
        field_name = _OPTION_FIELDS[key]
        if field_name == "enum_self_import_set":
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"Option {key} must be a list of type names")
            value = frozenset(value)
        elif field_name == "custom_types_mapping":
            if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
                raise ValueError(f"Option {key} must map type names to type names")
        elif field_name == "use_optional_for_nullable_return_types":
            value = value is True
        elif not isinstance(value, str):
            raise ValueError(f"Option {key} must be a string, got {type(value).__name__}")
        kwargs[field_name] = value
    return MappingContext(**kwargs)


def load_context(path: Path) -> MappingContext:
    """Load mapping options from a JSON file."""
    return context_from_dict(_read_json(path))


def load_definitions(path: Path) -> list[dict[str, Any]]:
    """Load the list of field definitions to resolve."""
    definitions = _read_json(path)
    if not isinstance(definitions, list):
        raise ValueError(f"{path}: expected a JSON list of field definitions")
    return definitions
