"""Tagged atom union built once from raw documentation nodes.

The parser output is shape-typed: a node is a function signature because it
has ``kind == "function"``, a union because it has ``names``, and so on.
``build_atom`` classifies a node exactly once, in a fixed order (first match
wins), so the renderer can dispatch on the atom class alone.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .models import SectionKind, _Record


@dataclass(frozen=True)
class EmptyAtom:
    pass


@dataclass(frozen=True)
class ListAtom:
    items: tuple[Atom, ...]


@dataclass(frozen=True)
class StringAtom:
    text: str


@dataclass(frozen=True)
class SignatureAtom:
    name: str
    params: tuple[Atom, ...]  # top-level parameters only
    returns: Atom


@dataclass(frozen=True)
class ObjectAtom:
    properties: tuple[Atom, ...]


@dataclass(frozen=True)
class UnionAtom:
    names: tuple[Atom, ...]


@dataclass(frozen=True)
class ParameterAtom:
    name: str
    type: Atom
    optional: bool = False
    variable: bool = False


@dataclass(frozen=True)
class NameAtom:
    name: str


Atom = Union[
    EmptyAtom,
    ListAtom,
    StringAtom,
    SignatureAtom,
    ObjectAtom,
    UnionAtom,
    ParameterAtom,
    NameAtom,
]

ATOM_TYPES = (
    EmptyAtom,
    ListAtom,
    StringAtom,
    SignatureAtom,
    ObjectAtom,
    UnionAtom,
    ParameterAtom,
    NameAtom,
)

EMPTY = EmptyAtom()


def is_deep_name(name: Any) -> bool:
    """A deep parameter (``options.prefix``) describes a property of another one."""
    return isinstance(name, str) and "." in name


def build_atom(node: Any) -> Atom:
    """Classify a raw node (or a model record) into an atom.

    Order matters: a typedef with ``params`` is a signature even when it also
    carries ``names``, and a parameter with a ``type`` wins over a bare name.
    """
    if isinstance(node, ATOM_TYPES):
        return node
    if isinstance(node, _Record):
        node = node.as_node()

    if isinstance(node, (list, tuple)):
        return ListAtom(tuple(build_atom(item) for item in node))

    if isinstance(node, str):
        return StringAtom(node)

    if not node or not isinstance(node, Mapping):
        return EMPTY

    kind = node.get("kind")
    if kind == SectionKind.FUNCTION or (
        kind == SectionKind.TYPEDEF and node.get("params") is not None
    ):
        params = node.get("params") or []
        top_level = [p for p in params if not _is_deep_param(p)]
        return SignatureAtom(
            name=_text(node.get("name")),
            params=tuple(build_atom(p) for p in top_level),
            returns=build_atom(node.get("returns")),
        )

    if kind == SectionKind.TYPEDEF and node.get("properties") is not None:
        return ObjectAtom(tuple(build_atom(p) for p in node["properties"]))

    names = node.get("names")
    if names is not None:
        if isinstance(names, (list, tuple)):
            return UnionAtom(tuple(build_atom(n) for n in names))
        return UnionAtom((build_atom(names),))

    name = node.get("name")
    type_node = node.get("type")
    if name and type_node:
        return ParameterAtom(
            name=_text(name),
            type=build_atom(type_node),
            optional=bool(node.get("optional")),
            variable=bool(node.get("variable")),
        )

    if type_node:
        return build_atom(type_node)

    if name:
        return NameAtom(_text(name))

    return EMPTY


def _is_deep_param(param: Any) -> bool:
    if isinstance(param, _Record):
        return is_deep_name(getattr(param, "name", None))
    if isinstance(param, Mapping):
        return is_deep_name(param.get("name"))
    return False


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
