from __future__ import annotations
import logging
from typing import Mapping, Optional

from pyrsistent import PMap, get_in

from .config import DEFAULT_CONFIG, TranslatorConfig
from .errors import InputError
from .finder import find_message_keypaths
from .logger import LOGGER_NAME
from .messages import generate_message, parse_translation
from .nodes import SLOT_KEY, detach, span
from .reconstituter import reconstitute
from .sanitizer import sanitize
from .utils import Keypath
from .validators import validate_message, validate_translation


class MessageSubstituter:
    """
    Replaces every message of a document with its reconstituted translation.

    translations: message key (as shown to translators) -> translated text
      string message : "Hello, world!"                  -> "Bonjour, monde!"
      element message: '<a:link href="x">Example</a:link>' -> '<i><a:link href="y">Exemple</a:link></i>'
    """

    def __init__(self, translations: Mapping[str, str], config: TranslatorConfig | None = None, *, logger: Optional[logging.Logger] = None):
        self.translations = translations
        self.config = config or DEFAULT_CONFIG
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def substitute(self, tree: PMap, keypath: Keypath) -> PMap:
        """Translate the message at `keypath` of the current tree."""
        # Pulled from the partially translated tree, so inner messages that
        # were already translated are used and don't get clobbered
        message = get_in(keypath, tree, no_default=True)
        translation = None
        try:
            key = generate_message(sanitize(validate_message(message, self.config), self.config), self.config)
            translation = self.translations.get(key)
            if not translation:
                raise InputError("Translation missing for:\n" + key)
            parsed = validate_translation(parse_translation(translation, message, self.config), self.config)
            result = reconstitute(parsed, message, self.config)
        except InputError as e:
            raise e.annotate(message, translation)

        self.logger.debug(f"Translated message at {'/'.join(map(str, keypath))}")
        result = detach(result).set(SLOT_KEY, span(message))
        if message.get("loc") is not None:
            result = result.set("loc", message["loc"])
        return tree.transform(keypath, result)

    def translate(self, tree: PMap) -> PMap:
        keypaths = find_message_keypaths(tree, self.config)
        # Bottom of the document first, inner messages before outer ones:
        # no substitution can then invalidate the keypath of another, either
        # by changing array indices or by relocating an inner message.
        for keypath in reversed(keypaths):
            tree = self.substitute(tree, keypath)
        self.logger.info(f"Translated {len(keypaths)} message(s)")
        return tree


def translate_messages_in_ast(tree: PMap, translations: Mapping[str, str], config: TranslatorConfig | None = None) -> PMap:
    return MessageSubstituter(translations, config).translate(tree)
