"""Structured form of target-language type names.

Type names travel through the generator as plain strings such as
``Seq[User]`` or ``java.util.List<Integer>``. Mappers parse them into the
variants below, decide on structure, and render back to text:

- PrimitiveType: an unwrapped primitive (``Int``, ``int``)
- NamedType:     any other type name, kept verbatim
- OptionalType:  optional wrapper (``Option[T]``)
- ListType:      collection wrapper (``Seq[T]``)
- BoundedType:   supertype bound (``_ <: T``)

Parsing balances brackets, so ``Seq[Option[T]]`` becomes
``ListType(OptionalType(NamedType("T")))``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

# Substitution point inside generic templates like "Future[%s]"
PLACEHOLDER = "%s"


@dataclass(frozen=True)
class PrimitiveType:
    name: str


@dataclass(frozen=True)
class NamedType:
    name: str


@dataclass(frozen=True)
class OptionalType:
    inner: TypeRef
    # Marker the type was parsed with, e.g. "scala.Option"; None renders the default
    outer: str | None = None


@dataclass(frozen=True)
class ListType:
    inner: TypeRef
    outer: str | None = None


@dataclass(frozen=True)
class BoundedType:
    inner: TypeRef


TypeRef = Union[PrimitiveType, NamedType, OptionalType, ListType, BoundedType]


@dataclass(frozen=True)
class TypeSyntax:
    """Lexical conventions of one target language."""

    list_type: str
    optional_type: str
    bound_prefix: str
    open_bracket: str = "["
    close_bracket: str = "]"
    list_aliases: tuple[str, ...] = ()
    optional_aliases: tuple[str, ...] = ()
    primitives: frozenset[str] = frozenset()
    # Primitive -> reference type, for languages that cannot parameterize on primitives
    boxed: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def generic(self, outer: str, inner: str) -> str:
        """Compose ``outer`` with ``inner``, honouring a ``%s`` template."""
        if PLACEHOLDER in outer:
            return outer.replace(PLACEHOLDER, inner)
        return f"{outer}{self.open_bracket}{inner}{self.close_bracket}"

    def box(self, type_name: str) -> str:
        return self.boxed.get(type_name, type_name)


def _is_balanced(text: str, open_bracket: str, close_bracket: str) -> bool:
    depth = 0
    for char in text:
        if char == open_bracket:
            depth += 1
        elif char == close_bracket:
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def generic_argument(
    type_name: str, outer: str, open_bracket: str = "[", close_bracket: str = "]",
) -> str | None:
    """Return the argument of ``outer[...]``, or None if ``type_name`` is not that form."""
    prefix = outer + open_bracket
    if not (type_name.startswith(prefix) and type_name.endswith(close_bracket)):
        return None
    inner = type_name[len(prefix):len(type_name) - len(close_bracket)]
    if not _is_balanced(inner, open_bracket, close_bracket):
        return None
    return inner


def _match_wrapper(
    type_name: str, markers: tuple[str, ...], syntax: TypeSyntax,
) -> tuple[str, str] | None:
    for marker in markers:
        inner = generic_argument(type_name, marker, syntax.open_bracket, syntax.close_bracket)
        if inner is not None:
            return marker, inner
    return None


def parse_type(type_name: str, syntax: TypeSyntax) -> TypeRef:
    """Parse a type-name string into its structured form."""
    if syntax.bound_prefix and type_name.startswith(syntax.bound_prefix):
        return BoundedType(parse_type(type_name[len(syntax.bound_prefix):], syntax))

    matched = _match_wrapper(type_name, (syntax.list_type, *syntax.list_aliases), syntax)
    if matched:
        marker, inner = matched
        outer = None if marker == syntax.list_type else marker
        return ListType(parse_type(inner, syntax), outer)

    matched = _match_wrapper(type_name, (syntax.optional_type, *syntax.optional_aliases), syntax)
    if matched:
        marker, inner = matched
        outer = None if marker == syntax.optional_type else marker
        return OptionalType(parse_type(inner, syntax), outer)

    if type_name in syntax.primitives:
        return PrimitiveType(type_name)
    return NamedType(type_name)


def _render_argument(type_ref: TypeRef, syntax: TypeSyntax) -> str:
    if isinstance(type_ref, PrimitiveType):
        return syntax.box(type_ref.name)
    return render_type(type_ref, syntax)


def render_type(type_ref: TypeRef, syntax: TypeSyntax) -> str:
    """Render a structured type back to its string form."""
    if isinstance(type_ref, (PrimitiveType, NamedType)):
        return type_ref.name
    if isinstance(type_ref, BoundedType):
        return syntax.bound_prefix + _render_argument(type_ref.inner, syntax)
    if isinstance(type_ref, ListType):
        outer = type_ref.outer or syntax.list_type
    else:
        outer = type_ref.outer or syntax.optional_type
    return syntax.generic(outer, _render_argument(type_ref.inner, syntax))
