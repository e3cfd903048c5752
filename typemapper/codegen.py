"""Render the preview template and write generated output.

Takes the context from context_builder and produces the type preview.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"


def render(context: dict[str, Any]) -> str:
    """Render preview.txt.j2 with the given context."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("preview.txt.j2")
    return template.render(**context)


def generate(context: dict[str, Any], output_path: Path) -> None:
    """Render the preview and write it to output_path."""
    output = render(context)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output)

    print(f"Generated {output_path} ({context['field_count']} fields)")
