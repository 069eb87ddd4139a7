"""
Reconstituting puts back what sanitizing took away.

The process starts with the translator's version and pulls details out of
the original: the translation decides the structure of the markup (nesting,
order, added or removed wrapper elements), while the original only supplies
the values of expressions and elided attributes.
"""
from __future__ import annotations
from typing import Any, Dict, List

from pyrsistent import PMap, pvector

from .config import TranslatorConfig
from .definitions import HiddenAttributes, collect_definitions
from .errors import InputError, UnhandledNodeType
from .matcher import is_named_expression
from .nodes import detach
from .printer import generate
from .syntax_tree import (
    attribute_expression,
    attribute_name,
    component_designation,
    generate_opening,
    has_unsafe_attributes,
    remove_designation,
    set_attribute_expression,
    update_attributes,
)

Definitions = Dict[str, Any]


def reconstitute(translated: PMap, original: PMap, config: TranslatorConfig) -> PMap:
    """
    Return `translated` with named expressions and elided attributes put
    back in from `original`. Definitions are always derived from the
    original as it is now.
    """
    return _reconstitute(translated, collect_definitions(original, config), config)


def _reconstitute(node: PMap, definitions: Definitions, config: TranslatorConfig) -> PMap:
    handler = _RECONSTITUTERS.get(node["type"])
    if handler is None:
        raise UnhandledNodeType("reconstitute", node["type"])
    return handler(node, definitions, config)


def _identity(node: PMap, definitions: Definitions, config: TranslatorConfig) -> PMap:
    return node


def _merge_attributes(translated: List[PMap], hidden: HiddenAttributes, config: TranslatorConfig) -> List[PMap]:
    # Hidden attributes keep their side of the shown ones, so a spread
    # written first still yields to the translator's attributes and one
    # written last still overrides them
    kept = [a for a in translated if attribute_name(a) != config.designation_attribute]
    return list(hidden.leading) + kept + list(hidden.trailing)


def _restore_expression(expression: PMap, definitions: Definitions, where: PMap) -> PMap:
    if not is_named_expression(expression):
        raise InputError("Translated message has JSX expression that isn't a placeholder name: " + generate(where))
    definition = definitions.get(generate(expression))
    if definition is None or isinstance(definition, HiddenAttributes):
        raise InputError("Translated message has a JSX expression whose name doesn't exist in the original: " + generate(where))
    # The original expression, verbatim
    return definition


def _reconstitute_attribute(attribute: PMap, definitions: Definitions) -> PMap:
    expression = attribute_expression(attribute)
    if expression is None:
        return attribute
    restored = _restore_expression(expression, definitions, attribute)
    return detach(set_attribute_expression(attribute, restored))


def _reconstitute_element(element: PMap, definitions: Definitions, config: TranslatorConfig) -> PMap:
    if has_unsafe_attributes(element, config):
        raise InputError("Translation includes unsafe attribute: " + generate_opening(element))

    element = update_attributes(element, lambda attrs: [_reconstitute_attribute(a, definitions) for a in attrs])

    designation = component_designation(element, config)
    if designation:
        hidden = definitions.get(designation)
        if not isinstance(hidden, HiddenAttributes):
            raise InputError(f"Translation contains designation '{designation}', which is not in the original.")
        element = update_attributes(element, lambda attrs: _merge_attributes(list(attrs), hidden, config))
        element = remove_designation(element, config)

    children = pvector(_reconstitute(c, definitions, config) for c in element["children"])
    return detach(element.set("children", children))


def _reconstitute_expression_container(container: PMap, definitions: Definitions, config: TranslatorConfig) -> PMap:
    restored = _restore_expression(container["expression"], definitions, container)
    return detach(container.set("expression", restored))


_RECONSTITUTERS = {
    "Literal": _identity,
    "JSXText": _identity,
    "JSXEmptyExpression": _identity,
    "JSXElement": _reconstitute_element,
    "JSXExpressionContainer": _reconstitute_expression_container,
}
