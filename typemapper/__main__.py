"""Entry point: python -m typemapper CONFIG DEFINITIONS [-o OUTPUT]

Reads mapping options and field definitions, prints or writes the resolved types.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .codegen import generate, render
from .context_builder import build_context
from .languages import get_type_mapper
from .loader import load_context, load_definitions


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="typemapper",
        description="Resolve GraphQL field types to target-language type names.",
    )
    parser.add_argument("config", type=Path, help="JSON file with mapping options")
    parser.add_argument("definitions", type=Path, help="JSON list of field definitions")
    parser.add_argument("-o", "--output", type=Path, help="write the preview here instead of stdout")
    args = parser.parse_args(argv)

    mapping_context = load_context(args.config)
    mapper = get_type_mapper(mapping_context.generated_language)
    context = build_context(mapper, mapping_context, load_definitions(args.definitions))

    if args.output:
        generate(context, args.output)
    else:
        print(render(context), end="")


if __name__ == "__main__":
    main()
