"""
Extracts translatable messages from JSX, sanitizes them for translators, and
puts translated messages back into the source with everything that was
hidden from the translator restored.

String messages are marked with an identity function:

    i18n("Hello, world!")

Element messages with a marker component:

    <I18N>Hello, <em>world!</em></I18N>

Attributes a translator should not see are elided; the element they belong
to needs a designation so the translation can be matched back up with it:

    <I18N><a:my-link href="example.com" target="_blank">Example</a:my-link></I18N>

is shown to the translator as

    <a:my-link href="example.com">Example</a:my-link>

and a translation such as

    <i>Click me: <a:my-link href="example.fr">Example</a:my-link></i>

comes back as

    <I18N><i>Click me: <a href="example.fr" target="_blank">Example</a></i></I18N>

`<a i18n-designation="my-link">` is an alternative to the namespace syntax
for sources that must stay executable.
"""
from .config import DEFAULT_CONFIG, TranslatorConfig
from .errors import InputError, InternalError, UnhandledNodeType
from .logger import setup_logger
from .pipeline import error_message_for_error, extract_messages, translate_messages

__all__ = [
    "DEFAULT_CONFIG",
    "TranslatorConfig",
    "InputError",
    "InternalError",
    "UnhandledNodeType",
    "setup_logger",
    "extract_messages",
    "translate_messages",
    "error_message_for_error",
]
