"""
Parsing JSX into persistent trees, and the element/attribute helpers the
rest of the pipeline is written against.

Trees are esprima's output converted to pyrsistent maps (nodes) and vectors
(node lists). Nodes are never mutated: every helper here returns a new node
that shares whatever it did not touch with its input.
"""
from __future__ import annotations
from typing import Any, Callable, List, Optional, Tuple

import esprima
from esprima.error_handler import Error as EsprimaError
from pyrsistent import PMap, PVector, pmap, pvector

from .config import TranslatorConfig
from .errors import InputError, InternalError
from .nodes import SOURCE_KEY
from .printer import generate


# ---------- parsing ----------

def _freeze(value: Any, source: Optional[str]) -> Any:
    if isinstance(value, list):
        return pvector(_freeze(v, source) for v in value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    fields = getattr(value, "__dict__", None)
    if fields is None:
        return value
    node = {k: _freeze(v, source) for k, v in fields.items() if not k.startswith("_")}
    if source is not None and "type" in node and "range" in node:
        node[SOURCE_KEY] = source
    return pmap(node)


def parse(src: str, source_type: str = "module", ranged: bool = True) -> PMap:
    """
    Parse JSX source text. With `ranged`, every node keeps its source range,
    its line/column location and a reference to `src`, which lets the printer
    reproduce untouched code verbatim.
    """
    options = {"jsx": True, "range": ranged, "loc": ranged}
    entry = esprima.parseModule if source_type == "module" else esprima.parseScript
    try:
        program = entry(src, options)
    except EsprimaError as e:
        raise InputError(f"Could not parse: {e}") from e
    return _freeze(program, src if ranged else None)


def parse_fragment(src: str) -> PMap:
    """Parse a single expression, such as a translation wrapped for parsing."""
    program = parse(src, source_type="script")
    body = program["body"]
    if len(body) != 1 or body[0]["type"] != "ExpressionStatement":
        raise InputError(f"Expected a single expression, got: {src}")
    return body[0]["expression"]


def make_placeholder_literal(text: str) -> PMap:
    # raw == value, so the printer shows the text unquoted
    return pmap({"type": "Literal", "value": text, "raw": text})


# ---------- element names and designations ----------

def component_name_node(element: PMap) -> PMap:
    name = element["openingElement"]["name"]
    kind = name["type"]
    if kind == "JSXNamespacedName":
        # <name:designation>
        return name["namespace"]
    if kind in ("JSXIdentifier", "JSXMemberExpression"):
        # <name> or <namey.mcnamerson>
        return name
    raise InternalError(f"Unknown component name type {kind} for component {generate_opening(element)}")


def component_name(element: PMap) -> str:
    return generate(component_name_node(element))


def component_designation(element: PMap, config: TranslatorConfig) -> Optional[str]:
    name = element["openingElement"]["name"]
    if name["type"] == "JSXNamespacedName":
        return generate(name["name"])
    return attribute_with_name(element, config.designation_attribute)


def set_element_name(element: PMap, name: PMap) -> PMap:
    element = element.set("openingElement", element["openingElement"].set("name", name))
    closing = element.get("closingElement")
    if closing is not None:
        element = element.set("closingElement", closing.set("name", name))
    return element


def rewrite_designation_to_namespace_syntax(element: PMap, config: TranslatorConfig) -> PMap:
    designation = component_designation(element, config)
    if not designation or attribute_with_name(element, config.designation_attribute) is None:
        return element
    namespaced = pmap({
        "type": "JSXNamespacedName",
        "namespace": component_name_node(element),
        "name": pmap({"type": "JSXIdentifier", "name": designation}),
    })
    return remove_attribute_with_name(set_element_name(element, namespaced), config.designation_attribute)


def remove_designation(element: PMap, config: TranslatorConfig) -> PMap:
    renamed = set_element_name(element, component_name_node(element))
    return remove_attribute_with_name(renamed, config.designation_attribute)


# ---------- attributes ----------

def attributes(element: PMap) -> PVector:
    return element["openingElement"]["attributes"]


def update_attributes(element: PMap, f: Callable[[PVector], Any]) -> PMap:
    opening = element["openingElement"]
    return element.set("openingElement", opening.set("attributes", pvector(f(opening["attributes"]))))


def attribute_name(attribute: PMap) -> Optional[str]:
    # Spread attributes have no name
    if attribute["type"] != "JSXAttribute":
        return None
    return generate(attribute["name"])


def attribute_value(attribute: PMap) -> Any:
    value = attribute.get("value")
    return value.get("value") if value is not None else None


def attribute_expression(attribute: PMap) -> Optional[PMap]:
    """The expression of `name={...}`, or None for strings, bare names and spreads."""
    value = attribute.get("value")
    if value is None or value["type"] != "JSXExpressionContainer":
        return None
    return value["expression"]


def set_attribute_expression(attribute: PMap, expression: PMap) -> PMap:
    return attribute.set("value", attribute["value"].set("expression", expression))


def attribute_with_name(element: PMap, name: str) -> Any:
    for attribute in attributes(element):
        if attribute_name(attribute) == name:
            return attribute_value(attribute)
    return None


def remove_attribute_with_name(element: PMap, name: str) -> PMap:
    return update_attributes(element, lambda attrs: [a for a in attrs if attribute_name(a) != name])


def safe_attributes(element: PMap, config: TranslatorConfig) -> List[PMap]:
    name = component_name(element)
    return [a for a in attributes(element) if config.attribute_is_safe(name, attribute_name(a))]


def hidden_attributes(element: PMap, config: TranslatorConfig) -> List[PMap]:
    """Attributes hidden from the translator, not counting the designation itself."""
    name = component_name(element)
    return [
        a for a in attributes(element)
        if not config.attribute_is_safe(name, attribute_name(a))
        and attribute_name(a) != config.designation_attribute
    ]


def split_hidden_attributes(element: PMap, config: TranslatorConfig) -> Tuple[List[PMap], List[PMap]]:
    """
    Hidden attributes written before the first shown attribute, and the rest.
    With no shown attribute at all, every hidden attribute counts as leading.
    """
    name = component_name(element)
    leading, trailing = [], []
    seen_safe = False
    for a in attributes(element):
        if config.attribute_is_safe(name, attribute_name(a)):
            seen_safe = True
        elif attribute_name(a) != config.designation_attribute:
            (trailing if seen_safe else leading).append(a)
    return leading, trailing


def has_unsafe_attributes(element: PMap, config: TranslatorConfig) -> bool:
    return bool(hidden_attributes(element, config))


def with_safe_attributes_only(element: PMap, config: TranslatorConfig) -> PMap:
    return update_attributes(element, lambda attrs: safe_attributes(element, config))


def generate_opening(element: PMap) -> str:
    return generate(element["openingElement"])
