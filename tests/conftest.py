"""Shared fixtures for the jsxlate test suite."""

import pytest
from pyrsistent import get_in

from jsxlate.config import TranslatorConfig
from jsxlate.finder import find_message_keypaths
from jsxlate.syntax_tree import parse


# ── Configuration ────────────────────────────────────────────────────────────

@pytest.fixture
def config() -> TranslatorConfig:
    """Default allow-list: only href on <a>."""
    return TranslatorConfig()


# ── Parsing helpers ──────────────────────────────────────────────────────────

@pytest.fixture
def first_message(config):
    """Parse source text and return its first message node."""

    def _first_message(src: str):
        tree = parse(src)
        return get_in(find_message_keypaths(tree, config)[0], tree, no_default=True)

    return _first_message


@pytest.fixture
def expression():
    """Parse source text holding a single expression statement."""

    def _expression(src: str):
        return parse(src)["body"][0]["expression"]

    return _expression


# ── Sample sources ───────────────────────────────────────────────────────────

@pytest.fixture
def link_message_src() -> str:
    return '<I18N><a:my-link href="example.com" target="_blank">Example</a:my-link></I18N>;\n'


@pytest.fixture
def component_src() -> str:
    return (
        "import React from 'react';\n"
        "\n"
        "// greeting\n"
        "export default function Greeting({user}) {\n"
        "    const title = i18n(\"Welcome\");\n"
        "    return (\n"
        "        <div className=\"greeting\" title={title}>\n"
        "            <I18N>Hello, <b>{user.name}</b>!</I18N>\n"
        "        </div>\n"
        "    );\n"
        "}\n"
    )
