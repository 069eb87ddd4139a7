"""
Sanitizing a message for presenting to the translator.

Translators should see some markup, so they can make necessary changes,
but other sorts of markup are confusing and irrelevant to them and dangerous
for them to edit:

1) Attributes not allowed for their component are removed. An element that
   loses attributes must carry a designation, which is kept in namespace
   form (`<a:my-link>`) so the translation can be matched back up.
2) Expressions are replaced with their printed name (`{foo.bar}`), so the
   translator sees a placeholder, never executable code.

Nothing removed here is lost: reconstitute recovers it from the original.
"""
from __future__ import annotations

from pyrsistent import PMap, pvector

from .config import TranslatorConfig
from .errors import InputError, UnhandledNodeType
from .matcher import is_named_expression
from .printer import generate
from .syntax_tree import (
    attribute_expression,
    make_placeholder_literal,
    rewrite_designation_to_namespace_syntax,
    set_attribute_expression,
    update_attributes,
    with_safe_attributes_only,
)


def sanitize(node: PMap, config: TranslatorConfig) -> PMap:
    handler = _SANITIZERS.get(node["type"])
    if handler is None:
        raise UnhandledNodeType("sanitize", node["type"])
    return handler(node, config)


def _identity(node: PMap, config: TranslatorConfig) -> PMap:
    return node


def _sanitize_attribute(attribute: PMap) -> PMap:
    expression = attribute_expression(attribute)
    if expression is None or _is_placeholder(expression):
        return attribute
    if not is_named_expression(expression):
        raise InputError("Message contains an attribute whose value is not a named expression: " + generate(attribute))
    return set_attribute_expression(attribute, make_placeholder_literal(generate(expression)))


def _sanitize_element(element: PMap, config: TranslatorConfig) -> PMap:
    element = with_safe_attributes_only(rewrite_designation_to_namespace_syntax(element, config), config)
    element = update_attributes(element, lambda attrs: [_sanitize_attribute(a) for a in attrs])
    return element.set("children", pvector(sanitize(c, config) for c in element["children"]))


def _is_placeholder(expression: PMap) -> bool:
    # Already sanitized: a literal printed without quotes
    return expression["type"] == "Literal" and expression.get("raw") == expression.get("value")


def _sanitize_expression_container(container: PMap, config: TranslatorConfig) -> PMap:
    expression = container["expression"]
    if _is_placeholder(expression):
        return container
    if not is_named_expression(expression):
        raise InputError("Message contains a non-named expression: " + generate(container))
    return container.set("expression", make_placeholder_literal(generate(expression)))


_SANITIZERS = {
    "Literal": _identity,
    "JSXText": _identity,
    "CallExpression": _identity,
    "JSXEmptyExpression": _identity,
    "JSXElement": _sanitize_element,
    "JSXExpressionContainer": _sanitize_expression_container,
}
