"""End-to-end tests for extract_messages, translate_messages and error reporting."""

import logging

import pytest

from jsxlate import (
    InputError,
    InternalError,
    TranslatorConfig,
    error_message_for_error,
    extract_messages,
    translate_messages,
)


# ── Extraction ───────────────────────────────────────────────────────────────

class TestExtractMessages:
    """Message keys in document order."""

    def test_string_message(self):
        assert extract_messages('i18n("Hello, world!");') == ["Hello, world!"]

    def test_element_message_with_elided_attribute(self, link_message_src):
        assert extract_messages(link_message_src) == ['<a:my-link href="example.com">Example</a:my-link>']

    def test_component(self, component_src):
        assert extract_messages(component_src) == ["Welcome", "Hello, <b>{user.name}</b>!"]

    def test_nested_messages_outer_first(self):
        assert extract_messages("<I18N><b><I18N>x</I18N></b></I18N>;") == ["<b><I18N>x</I18N></b>", "x"]

    def test_no_messages(self):
        assert extract_messages("const x = 1;") == []

    def test_code_in_shown_attribute_is_rejected(self):
        with pytest.raises(InputError, match=r"not a named expression: href=\{getUrl\(user.id\)\}"):
            extract_messages("<I18N><a href={getUrl(user.id)}>x</a></I18N>;")

    def test_named_attribute_expression_is_shown(self):
        assert extract_messages("<I18N><a href={link.url}>x</a></I18N>;") == ["<a href={link.url}>x</a>"]

    def test_direct_nesting_is_reported_with_message(self):
        with pytest.raises(InputError, match="Don't directly nest") as info:
            extract_messages("<I18N>a<I18N>b</I18N></I18N>;")
        assert info.value.message_ast["type"] == "JSXElement"
        assert info.value.line == 1

    def test_unparseable_source(self):
        with pytest.raises(InputError, match="Could not parse"):
            extract_messages("<I18N>unclosed;")

    def test_script_source_type(self):
        src = 'with (o) { i18n("a"); }'
        assert extract_messages(src, TranslatorConfig(source_type="script")) == ["a"]
        with pytest.raises(InputError):
            extract_messages(src)

    def test_custom_allow_list_shows_attribute(self, link_message_src):
        config = TranslatorConfig(allowed_attributes_by_component={"a": {"href", "target"}})
        assert extract_messages(link_message_src, config) == [
            '<a:my-link href="example.com" target="_blank">Example</a:my-link>'
        ]

    def test_logs_count(self, caplog, component_src):
        with caplog.at_level(logging.INFO, logger="jsxlate"):
            extract_messages(component_src)
        assert "Extracted 2 message(s)" in caplog.text


# ── Translation ──────────────────────────────────────────────────────────────

class TestTranslateMessages:
    """Substituting translations back into source."""

    def test_string_message(self):
        assert translate_messages('i18n("Hello, world!");', {"Hello, world!": "Bonjour, monde!"}) == '"Bonjour, monde!";'

    def test_string_message_is_requoted(self):
        out = translate_messages('x = i18n("Say hi");', {"Say hi": 'Dites "salut"'})
        assert out == 'x = "Dites \\"salut\\"";'

    def test_hidden_attribute_restored(self, link_message_src):
        translations = {
            '<a:my-link href="example.com">Example</a:my-link>':
                '<i>Click me: <a:my-link href="example.fr">Example</a:my-link></i>',
        }
        assert translate_messages(link_message_src, translations) == (
            '<I18N><i>Click me: <a href="example.fr" target="_blank">Example</a></i></I18N>;\n'
        )

    def test_code_outside_messages_is_untouched(self, component_src):
        translations = {
            "Welcome": "Bienvenue",
            "Hello, <b>{user.name}</b>!": "Bonjour, <b>{user.name}</b> !",
        }
        expected = (
            component_src
            .replace('i18n("Welcome")', '"Bienvenue"')
            .replace("<I18N>Hello, <b>{user.name}</b>!</I18N>", "<I18N>Bonjour, <b>{user.name}</b> !</I18N>")
        )
        assert translate_messages(component_src, translations) == expected

    def test_identity_translation_keeps_message(self):
        src = "// top\n<p><I18N>Hello, <b>{user.name}</b>!</I18N></p>;\n"
        assert translate_messages(src, {"Hello, <b>{user.name}</b>!": "Hello, <b>{user.name}</b>!"}) == src

    def test_inner_messages_translated_first(self):
        translations = {
            "x": "y",
            "<b><I18N>y</I18N></b>": "<strong><I18N>y</I18N></strong>",
        }
        out = translate_messages("<I18N><b><I18N>x</I18N></b></I18N>;", translations)
        assert out == "<I18N><strong><I18N>y</I18N></strong></I18N>;"

    def test_messages_in_attributes(self):
        src = '<I18N><a:l title={i18n("Tip")} href="h">Go</a:l></I18N>;'
        translations = {"Tip": "Astuce", '<a:l href="h">Go</a:l>': '<a:l href="h">Allez</a:l>'}
        assert translate_messages(src, translations) == '<I18N><a title={"Astuce"} href="h">Allez</a></I18N>;'

    def test_code_in_translated_attribute_is_rejected(self):
        with pytest.raises(InputError, match="isn't a placeholder name") as info:
            translate_messages('<I18N><a href="h">x</a></I18N>;', {'<a href="h">x</a>': '<a href={fetch("//evil")}>x</a>'})
        assert info.value.translation_string == '<a href={fetch("//evil")}>x</a>'

    def test_named_attribute_expression_round_trip(self):
        src = "<I18N><a href={link.url}>Home</a></I18N>;"
        out = translate_messages(src, {"<a href={link.url}>Home</a>": "<a href={link.url}>Accueil</a>"})
        assert out == "<I18N><a href={link.url}>Accueil</a></I18N>;"

    def test_translation_closing_the_wrapper_is_input_error(self):
        with pytest.raises(InputError, match="not a single message"):
            translate_messages("<I18N>Hi</I18N>;", {"Hi": "x</I18N>, <I18N>y"})

    def test_several_messages_in_one_document(self):
        src = 'a(i18n("one"), i18n("two"));\nb(i18n("three"));'
        out = translate_messages(src, {"one": "un", "two": "deux", "three": "trois"})
        assert out == 'a("un", "deux");\nb("trois");'

    def test_missing_translation(self):
        with pytest.raises(InputError) as info:
            translate_messages('\ni18n("Hi");', {})
        assert info.value.description == "Translation missing for:\nHi"
        assert info.value.line == 2
        assert info.value.translation_string is None

    def test_empty_translation_is_missing(self):
        with pytest.raises(InputError, match="Translation missing"):
            translate_messages('i18n("Hi");', {"Hi": ""})

    def test_unparseable_translation_keeps_text(self):
        with pytest.raises(InputError, match="Could not parse") as info:
            translate_messages("<I18N>Hi</I18N>;", {"Hi": "<b>Salut"})
        assert info.value.translation_string == "<b>Salut"

    def test_duplicate_in_translation(self):
        with pytest.raises(InputError, match="same name: name"):
            translate_messages("<I18N>Hi {name}</I18N>;", {"Hi {name}": "{name} {name}"})


# ── Error reporting ──────────────────────────────────────────────────────────

class TestErrorMessageForError:
    """Human-readable rendering of failures."""

    def test_with_message_and_translation(self):
        with pytest.raises(InputError) as info:
            translate_messages("<I18N>Hi {name}</I18N>;", {"Hi {name}": "Salut {nom}"})
        assert error_message_for_error(info.value) == (
            "\nOn line 1, when processing the message... \n\n"
            "<I18N>Hi {name}</I18N>\n\n"
            "...and its associated translation... \n\n"
            "Salut {nom}\n\n"
            "...the following error occurred: \n\n"
            "Translated message has a JSX expression whose name doesn't exist in the original: {nom}\n"
        )

    def test_with_message_only(self):
        with pytest.raises(InputError) as info:
            translate_messages('i18n("Hi");', {})
        assert error_message_for_error(info.value) == (
            "\nOn line 1, when processing the message... \n\n"
            'i18n("Hi")\n\n'
            "...the following error occurred: \n\n"
            "Translation missing for:\nHi\n"
        )

    def test_without_context(self):
        assert error_message_for_error(InputError("Could not parse: bad")) == "Could not parse: bad\n"

    def test_other_errors_show_traceback(self):
        try:
            raise InternalError("Internal error: boom")
        except InternalError as e:
            text = error_message_for_error(e)
        assert text.startswith("Traceback")
        assert "Internal error: boom" in text
