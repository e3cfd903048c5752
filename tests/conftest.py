"""Shared fixtures for type mapper tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from typemapper.java import JavaTypeMapper
from typemapper.scala import ScalaTypeMapper


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

@pytest.fixture
def scala() -> ScalaTypeMapper:
    return ScalaTypeMapper()


@pytest.fixture
def java() -> JavaTypeMapper:
    return JavaTypeMapper()


# ---------------------------------------------------------------------------
# JSON input files
# ---------------------------------------------------------------------------

@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a callable that writes data as JSON under tmp_path.

    Usage in tests::

        config_path = write_json("config.json", {"generatedLanguage": "java"})
    """
    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path
    return _write
