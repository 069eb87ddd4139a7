from __future__ import annotations
import logging
from typing import List

from pyrsistent import PMap, get_in

from .config import TranslatorConfig
from .errors import InputError
from .logger import LOGGER_NAME
from .matcher import is_marker, is_string_literal, is_string_marker
from .nodes import child_nodes
from .printer import generate
from .utils import Keypath

logger = logging.getLogger(LOGGER_NAME)


def all_keypaths(tree: PMap) -> List[Keypath]:
    """
    Keypath of every node below `tree`, pre-order: a parent always comes
    before its descendants, and earlier source before later source.
    """
    keypaths: List[Keypath] = []

    def walk(node: PMap, keypath: Keypath) -> None:
        for relative, child in child_nodes(node):
            child_keypath = keypath + relative
            keypaths.append(child_keypath)
            walk(child, child_keypath)

    walk(tree, ())
    return keypaths


def find_message_keypaths(tree: PMap, config: TranslatorConfig) -> List[Keypath]:
    """
    Return the keypath for each message in the tree, with ancestors coming
    before descendants and earlier messages in the source coming before
    later messages. Order matters: the substitution driver relies on it.
    """
    keypaths = [kp for kp in all_keypaths(tree) if is_marker(get_in(kp, tree, no_default=True), config)]

    # Validate arguments of string markers
    for keypath in keypaths:
        marker = get_in(keypath, tree, no_default=True)
        if not is_string_marker(marker, config):
            continue
        if len(marker["arguments"]) != 1:
            raise InputError("Message marker must have exactly one argument: " + generate(marker)).annotate(marker)
        if not is_string_literal(marker["arguments"][0]):
            raise InputError("Message should be a string literal, but was instead: " + generate(marker)).annotate(marker)

    logger.debug(f"Found {len(keypaths)} message(s)")
    return keypaths
