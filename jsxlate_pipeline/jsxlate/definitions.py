"""
Definitions of named expressions.

Everything sanitize hides from a translator is stored under a name: the
attributes elided from an element under the element's designation, and the
expression inside `{...}` (as a child or as a shown attribute's value) under
its printed text. Reconstitute looks these names up again in the translation.
"""
from __future__ import annotations
from typing import Any, Dict, List, NamedTuple, Tuple

from pyrsistent import PMap, PVector, pvector

from .config import TranslatorConfig
from .errors import InputError
from .matcher import is_named_expression
from .printer import generate
from .syntax_tree import (
    attribute_expression,
    component_designation,
    generate_opening,
    safe_attributes,
    split_hidden_attributes,
)
from .utils import duplicated_values

Definition = Tuple[str, Any]


class HiddenAttributes(NamedTuple):
    """Attributes elided from a designated element, around its first shown attribute."""
    leading: PVector
    trailing: PVector

    def all(self) -> PVector:
        return self.leading + self.trailing


def collect_definitions(message: PMap, config: TranslatorConfig) -> Dict[str, Any]:
    pairs = _definitions(message, config)
    dupes = duplicated_values(name for name, _ in pairs)
    if dupes:
        raise InputError("Message has two named expressions with the same name: " + ", ".join(dupes))
    return dict(pairs)


def _definitions(node: PMap, config: TranslatorConfig) -> List[Definition]:
    handler = _HANDLERS.get(node["type"])
    return handler(node, config) if handler else []


def _element_definitions(element: PMap, config: TranslatorConfig) -> List[Definition]:
    leading, trailing = split_hidden_attributes(element, config)
    designation = component_designation(element, config)
    if (leading or trailing) and not designation:
        raise InputError("Element needs a designation: " + generate_opening(element))

    pairs: List[Definition] = []
    if designation:
        pairs.append((designation, HiddenAttributes(pvector(leading), pvector(trailing))))
    for attribute in safe_attributes(element, config):
        expression = attribute_expression(attribute)
        if expression is not None and is_named_expression(expression):
            pairs.append((generate(expression), expression))
    for child in element["children"]:
        pairs.extend(_definitions(child, config))
    return pairs


def _expression_container_definitions(container: PMap, config: TranslatorConfig) -> List[Definition]:
    expression = container["expression"]
    if is_named_expression(expression):
        return [(generate(expression), expression)]
    return []


_HANDLERS = {
    "JSXElement": _element_definitions,
    "JSXExpressionContainer": _expression_container_definitions,
}
