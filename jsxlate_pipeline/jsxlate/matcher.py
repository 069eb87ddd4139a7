"""
Declarative matching of nodes against partial tree shapes.

A pattern is a (nested) mapping. Every field it names must match the node:
mappings recurse, callables are predicates on the field value, anything else
is compared for equality. Fields the pattern leaves out are ignored.
"""
from __future__ import annotations
from typing import Any, Callable, Mapping

from pyrsistent import freeze

from .config import TranslatorConfig


def matches(node: Any, pattern: Any) -> bool:
    if isinstance(node, Mapping) and isinstance(pattern, Mapping):
        return all(matches(node.get(k), v) for k, v in pattern.items())
    if callable(pattern):
        return bool(pattern(node))
    return pattern == node


def matcher(pattern: Mapping) -> Callable[[Any], bool]:
    frozen = freeze(pattern)
    return lambda node: matches(node, frozen)


is_string_literal = matcher({
    "type": "Literal",
    "value": lambda v: isinstance(v, str),
})

is_jsx_element = matcher({"type": "JSXElement"})

is_jsx_text = matcher({"type": "JSXText"})

is_identifier = matcher({"type": "Identifier"})

is_simple_member_expression = matcher({
    "type": "MemberExpression",
    "computed": False,
    "object": lambda n: is_identifier(n) or is_simple_member_expression(n),
    "property": is_identifier,
})


def is_named_expression(node: Any) -> bool:
    return is_identifier(node) or is_simple_member_expression(node)


# ---------- markers ----------

def string_marker_pattern(config: TranslatorConfig) -> dict:
    return {
        "type": "CallExpression",
        "callee": {
            "type": "Identifier",
            "name": config.string_marker,
        },
    }


def element_marker_pattern(config: TranslatorConfig) -> dict:
    return {
        "type": "JSXElement",
        "openingElement": {
            "type": "JSXOpeningElement",
            "selfClosing": False,
            "name": {
                "type": "JSXIdentifier",
                "name": config.element_marker,
            },
        },
    }


def is_string_marker(node: Any, config: TranslatorConfig) -> bool:
    return matches(node, freeze(string_marker_pattern(config)))


def is_element_marker(node: Any, config: TranslatorConfig) -> bool:
    return matches(node, freeze(element_marker_pattern(config)))


def is_marker(node: Any, config: TranslatorConfig) -> bool:
    return is_string_marker(node, config) or is_element_marker(node, config)
