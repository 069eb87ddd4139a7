"""
Printing and unprinting messages.

The text shown to translators is not exactly the printed form of any single
node. String messages are shown unquoted, so translations are requoted before
parsing. Element messages are shown without the outer marker tag: the
children are printed and concatenated, and translations are wrapped in the
marker tags again before parsing.
"""
from __future__ import annotations
import json

from pyrsistent import PMap

from .config import TranslatorConfig
from .errors import InputError, InternalError
from .matcher import is_element_marker, is_jsx_text, is_string_literal, is_string_marker
from .printer import generate
from .syntax_tree import parse_fragment


def generate_message(message: PMap, config: TranslatorConfig) -> str:
    if is_string_marker(message, config):
        return message["arguments"][0]["value"]
    if is_element_marker(message, config):
        return "".join(_generate_child(c) for c in message["children"])
    raise InternalError("Internal error: message is not string literal or JSX element: " + generate(message))


def _generate_child(node: PMap) -> str:
    if is_jsx_text(node) or is_string_literal(node):
        return node["value"]
    return generate(node)


def _quote(text: str) -> str:
    quoted = json.dumps(text, ensure_ascii=False)
    # Line separators are not allowed unescaped in ES5 string literals
    return quoted.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")


def prepare_translation_for_parsing(translation: str, original: PMap, config: TranslatorConfig) -> str:
    if is_string_marker(original, config):
        return _quote(translation)
    if is_element_marker(original, config):
        tag = config.element_marker
        return f"<{tag}>{translation}</{tag}>"
    raise InternalError("Internal error: message is not string literal or JSX element: " + generate(original))


def parse_translation(translation: str, original: PMap, config: TranslatorConfig) -> PMap:
    parsed = parse_fragment(prepare_translation_for_parsing(translation, original, config))
    # Markup in the translation can close the wrapper tag early
    if is_element_marker(original, config):
        well_formed = is_element_marker(parsed, config)
    else:
        well_formed = is_string_literal(parsed)
    if not well_formed:
        raise InputError("Translation is not a single message: " + translation)
    return parsed
