from __future__ import annotations

from pyrsistent import PMap

from .config import TranslatorConfig
from .definitions import collect_definitions
from .errors import InputError, InternalError
from .matcher import is_element_marker, is_named_expression, is_string_marker
from .printer import generate
from .syntax_tree import (
    attribute_expression,
    component_designation,
    generate_opening,
    has_unsafe_attributes,
    safe_attributes,
)


def validate_message(node: PMap, config: TranslatorConfig) -> PMap:
    """Check the preconditions of sanitize. Returns the node unchanged."""
    handler = _MESSAGE_VALIDATORS.get(node["type"])
    if handler is not None:
        handler(node, config)
    return node


def _validate_call_expression(node: PMap, config: TranslatorConfig) -> None:
    # The only valid call expression is the outer message marker
    if not is_string_marker(node, config):
        raise InternalError("Internal error: tried to sanitize call expression: " + generate(node))


def _validate_element(node: PMap, config: TranslatorConfig) -> None:
    # Raises on duplicated definitions
    collect_definitions(node, config)

    if has_unsafe_attributes(node, config) and not component_designation(node, config):
        raise InputError("Element needs a designation: " + generate_opening(node))

    for attribute in safe_attributes(node, config):
        expression = attribute_expression(attribute)
        if expression is not None and not is_named_expression(expression):
            raise InputError("Message contains an attribute whose value is not a named expression: " + generate(attribute))

    if is_element_marker(node, config) and any(is_element_marker(c, config) for c in node["children"]):
        raise InputError(f"Don't directly nest <{config.element_marker}> tags: " + generate(node))

    for child in node["children"]:
        validate_message(child, config)


def _validate_expression_container(node: PMap, config: TranslatorConfig) -> None:
    if not is_named_expression(node["expression"]):
        raise InputError("Message contains a non-named expression: " + generate(node))


_MESSAGE_VALIDATORS = {
    "CallExpression": _validate_call_expression,
    "JSXElement": _validate_element,
    "JSXExpressionContainer": _validate_expression_container,
}


def validate_translation(translation: PMap, config: TranslatorConfig) -> PMap:
    # Raises on duplicated definitions
    collect_definitions(translation, config)
    return translation
