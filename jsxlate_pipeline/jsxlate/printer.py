"""
Printing trees back to text.

`generate` is the canonical printer: JSX, identifiers, member expressions and
literals are printed from their structure, so the same markup always prints
the same way. It is what message keys and placeholder names are made of.

`render` reproduces source. A node that still knows its source range is
printed by copying the original text and splicing in its re-rendered
children; anything else goes through `generate`. Code outside the messages
of a document therefore comes back exactly as it was written.
"""
from __future__ import annotations
import json
from typing import Callable, Dict

from pyrsistent import PMap

from .errors import InternalError, UnhandledNodeType
from .nodes import SOURCE_KEY, child_nodes, span

# Member objects that never need parentheses
_PRIMARY = {"Identifier", "MemberExpression", "CallExpression", "ThisExpression", "Literal"}


def _literal(node: PMap) -> str:
    raw = node.get("raw")
    if raw is not None:
        return raw
    value = node.get("value")
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def _member(node: PMap) -> str:
    obj = generate(node["object"])
    if node["object"]["type"] not in _PRIMARY:
        obj = f"({obj})"
    if node.get("computed"):
        return f"{obj}[{generate(node['property'])}]"
    return f"{obj}.{generate(node['property'])}"


def _opening(node: PMap) -> str:
    attrs = "".join(" " + generate(a) for a in node["attributes"])
    end = " />" if node["selfClosing"] else ">"
    return f"<{generate(node['name'])}{attrs}{end}"


def _element(node: PMap) -> str:
    closing = node.get("closingElement")
    children = "".join(generate(c) for c in node["children"])
    return generate(node["openingElement"]) + children + (generate(closing) if closing is not None else "")


def _attribute(node: PMap) -> str:
    value = node.get("value")
    name = generate(node["name"])
    return name if value is None else f"{name}={generate(value)}"


_GENERATORS: Dict[str, Callable[[PMap], str]] = {
    "JSXElement": _element,
    "JSXOpeningElement": _opening,
    "JSXClosingElement": lambda n: f"</{generate(n['name'])}>",
    "JSXAttribute": _attribute,
    "JSXSpreadAttribute": lambda n: "{..." + generate(n["argument"]) + "}",
    "JSXIdentifier": lambda n: n["name"],
    "JSXNamespacedName": lambda n: f"{generate(n['namespace'])}:{generate(n['name'])}",
    "JSXMemberExpression": lambda n: f"{generate(n['object'])}.{generate(n['property'])}",
    "JSXExpressionContainer": lambda n: "{" + generate(n["expression"]) + "}",
    "JSXEmptyExpression": lambda n: "",
    "JSXText": lambda n: n["value"],
    "Literal": _literal,
    "Identifier": lambda n: n["name"],
    "MemberExpression": _member,
}


def generate(node: PMap) -> str:
    handler = _GENERATORS.get(node["type"])
    if handler is not None:
        return handler(node)
    if node.get("range") is not None and node.get(SOURCE_KEY) is not None:
        return render(node)
    raise UnhandledNodeType("generate", node["type"])


def render(node: PMap) -> str:
    source = node.get(SOURCE_KEY)
    if node.get("range") is None or source is None:
        return generate(node)

    start, end = node["range"]
    out, pos = [], start
    spans = []
    for _, child in child_nodes(node):
        if span(child) is None:
            raise InternalError(f"Cannot place a {child['type']} node inside {node['type']}: it has no source position")
        spans.append((span(child), child))
    # Widest first among children starting at the same offset
    spans.sort(key=lambda sc: (sc[0][0], -sc[0][1]))
    for (child_start, child_end), child in spans:
        if child_start < pos:
            # shorthand properties list the same source twice
            continue
        out.append(source[pos:child_start])
        out.append(render(child))
        pos = child_end
    out.append(source[pos:end])
    return "".join(out)
