"""Extraction of knob descriptors from Angular ``@Input()`` properties.

Input properties are recognised purely by spelling: any decorator with an
``Input`` identifier among its descendants marks the property it decorates.
Nothing is resolved semantically, so an unrelated identifier named ``Input``
inside a decorator is a false positive and an aliased import
(``import { Input as Prop }``) is missed.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from tree_sitter import Node

from .logging import get_logger
from .models import InputDescriptor, KnobType
from .parsing import SourceTree, find_descendants, get_ts_source_file, iter_descendants, node_text
from .tree import FileTree

_LOGGER = get_logger("inputs")

INPUT_MARKER = "Input"
PROPERTY_DECLARATION = "public_field_definition"

_TYPE_NAME_TO_KNOB: Dict[str, KnobType] = {
    "string": KnobType.TEXT,
    "number": KnobType.NUMBER,
    "boolean": KnobType.BOOLEAN,
}

_INITIALIZER_TO_KNOB: Dict[str, KnobType] = {
    "string": KnobType.TEXT,
    "number": KnobType.NUMBER,
    "true": KnobType.BOOLEAN,
    "false": KnobType.BOOLEAN,
}

_TYPE_NAME_TO_DEFAULT: Dict[str, str] = {
    "string": "''",
    "number": "0",
    "boolean": "false",
}

_EMPTY_STRING_LITERAL = "''"


def is_input_decorator(decorator: Node) -> bool:
    return any(
        node_text(identifier) == INPUT_MARKER
        for identifier in find_descendants(decorator, "identifier")
    )


def find_input_decorators(source: SourceTree) -> List[Tuple[Node, Node]]:
    """Return ``(decorator, property declaration)`` pairs in source order."""
    pairs: List[Tuple[Node, Node]] = []
    for node in iter_descendants(source.root):
        if node.type != "decorator" or not is_input_decorator(node):
            continue
        parent = node.parent
        if parent is None or parent.type != PROPERTY_DECLARATION:
            _LOGGER.debug(
                "Skipping @%s decorator at %s:%d without a property declaration",
                INPUT_MARKER,
                source.path,
                node.start_point[0] + 1,
            )
            continue
        pairs.append((node, parent))
    return pairs


def get_input_property_declarations(tree: FileTree, path: str) -> List[Node]:
    """Return the property declarations decorated with ``@Input`` in ``path``."""
    source = get_ts_source_file(tree, path)
    return [declaration for _, declaration in find_input_decorators(source)]


def get_input_descriptors(tree: FileTree, path: str) -> List[InputDescriptor]:
    """Parse ``path`` from ``tree`` and describe each of its input properties."""
    source = get_ts_source_file(tree, path)
    descriptors = [
        InputDescriptor(
            name=_input_name(decorator, declaration),
            type=get_knob_type(declaration),
            default_value=get_knob_default_value(declaration),
        )
        for decorator, declaration in find_input_decorators(source)
    ]
    _LOGGER.debug("Found %d input(s) in %s", len(descriptors), path)
    return descriptors


def _input_name(decorator: Node, declaration: Node) -> str:
    aliases = find_descendants(decorator, "string")
    if aliases:
        alias = node_text(aliases[0])[1:-1]
        if alias:
            return alias
    name_node = declaration.child_by_field_name("name")
    return node_text(name_node) if name_node is not None else ""


def _type_name(declaration: Node) -> Optional[str]:
    annotation = declaration.child_by_field_name("type")
    if annotation is None:
        return None
    if annotation.named_children:
        return node_text(annotation.named_children[0]).strip()
    return node_text(annotation).lstrip(":").strip()


def _initializer(declaration: Node) -> Optional[Node]:
    return declaration.child_by_field_name("value")


def get_knob_type(declaration: Node) -> KnobType:
    """Infer the knob kind from the declared type, then from the initializer."""
    type_name = _type_name(declaration)
    if type_name is not None:
        return _TYPE_NAME_TO_KNOB.get(type_name, KnobType.TEXT)
    initializer = _initializer(declaration)
    if initializer is not None:
        return _INITIALIZER_TO_KNOB.get(initializer.type, KnobType.TEXT)
    return KnobType.TEXT


def get_knob_default_value(declaration: Node) -> Optional[str]:
    """Return the knob's default literal.

    The initializer text is used verbatim when present. Otherwise a zero
    value for ``string``, ``number`` or ``boolean`` annotations, ``''`` when
    the property has no annotation, and ``None`` for any other annotated type.
    """
    initializer = _initializer(declaration)
    if initializer is not None:
        return node_text(initializer)
    type_name = _type_name(declaration)
    if type_name is None:
        return _EMPTY_STRING_LITERAL
    return _TYPE_NAME_TO_DEFAULT.get(type_name)


__all__ = [
    "INPUT_MARKER",
    "find_input_decorators",
    "get_input_descriptors",
    "get_input_property_declarations",
    "get_knob_default_value",
    "get_knob_type",
    "is_input_decorator",
]
