from __future__ import annotations
import logging
import traceback
from typing import List, Mapping

from pyrsistent import get_in

from .config import DEFAULT_CONFIG, TranslatorConfig
from .errors import InputError
from .finder import find_message_keypaths
from .logger import LOGGER_NAME
from .messages import generate_message
from .printer import generate, render
from .sanitizer import sanitize
from .substitution import MessageSubstituter
from .syntax_tree import parse
from .validators import validate_message

logger = logging.getLogger(LOGGER_NAME)


def extract_messages(src: str, config: TranslatorConfig | None = None) -> List[str]:
    """Given source code, return the key of every message, in document order."""
    config = config or DEFAULT_CONFIG
    tree = parse(src, config.source_type)
    out: List[str] = []
    for keypath in find_message_keypaths(tree, config):
        message = get_in(keypath, tree, no_default=True)
        try:
            out.append(generate_message(sanitize(validate_message(message, config), config), config))
        except InputError as e:
            raise e.annotate(message)
    logger.info(f"Extracted {len(out)} message(s)")
    return out


def translate_messages(src: str, translations: Mapping[str, str], config: TranslatorConfig | None = None) -> str:
    """
    Given source code and a translations table, return the source code with
    every message translated. Code outside of messages is left as written.
    """
    config = config or DEFAULT_CONFIG
    tree = parse(src, config.source_type)
    translated = MessageSubstituter(translations, config).translate(tree)
    start, end = tree["range"]
    return src[:start] + render(translated) + src[end:]


def error_message_for_error(e: BaseException) -> str:
    """
    A user-friendly description for errors in the source or in the
    translations; the message and traceback for anything else.
    """
    if isinstance(e, InputError) and e.message_ast is not None:
        parts = [
            f"\nOn line {e.line}, when processing the message... \n\n",
            generate(e.message_ast) + "\n\n",
        ]
        if e.translation_string is not None:
            parts.append("...and its associated translation... \n\n" + e.translation_string + "\n\n")
        parts.append("...the following error occurred: \n\n" + e.description + "\n")
        return "".join(parts)
    if isinstance(e, InputError):
        return e.description + "\n"
    return "".join(traceback.format_exception(type(e), e, e.__traceback__))
