"""Tests for the recursive atom renderer."""

import pytest

from jsdoc_render.atom_renderer import render_atom
from jsdoc_render.style import RenderStyle

MARKDOWN = RenderStyle.markdown()
OPTIONAL = '<sub title="Optional">?</sub>'

LEN = {
    "name": "len",
    "kind": "function",
    "params": [{"name": "data", "type": {"names": ["Tree"]}}],
    "returns": [{"type": {"names": ["number"]}}],
}


class TestSimpleAtoms:
    """Strings, absent values, unions and lists."""

    def test_string_is_escaped(self):
        assert render_atom("Array.<string>") == "string[]"

    @pytest.mark.parametrize("atom", [None, {}, {"foo": 1}, 3.5])
    def test_unrecognized_renders_empty(self, atom):
        assert render_atom(atom) == ""

    def test_union(self):
        assert render_atom({"names": ["string", "number"]}) == "string | number"

    def test_union_propagates_linking(self):
        assert (
            render_atom({"names": ["Tree", "null"]}, link=True)
            == "<a href='#tree'>Tree</a> | null"
        )

    def test_list_joins_with_comma(self):
        assert render_atom([{"name": "a"}, {"name": "b"}]) == "a, b"


class TestParameters:
    """Parameters with a type."""

    def test_html_parameter_has_type_tooltip(self):
        atom = {"name": "data", "type": {"names": ["Tree"]}}
        assert render_atom(atom) == "<b title='Tree'>data</b>"

    def test_optional_and_variadic_markers(self):
        assert (
            render_atom({"name": "data", "type": {"names": ["Tree"]}, "optional": True})
            == f"<b title='Tree'>data</b>{OPTIONAL}"
        )
        assert (
            render_atom({"name": "args", "type": {"names": ["number"]}, "variable": True})
            == "...<b title='number'>args</b>"
        )

    def test_tooltip_is_never_linked_and_quotes_are_escaped(self):
        atom = {"name": "mode", "type": {"names": ["'a'", "Tree"]}}
        assert render_atom(atom, link=True) == "<b title='&#x27;a&#x27; | Tree'>mode</b>"

    def test_tooltip_entities_are_escaped_once(self):
        atom = {"name": "m", "type": {"names": ["Map<K>&V"]}}
        assert render_atom(atom) == "<b title='Map&lt;K&gt;&amp;V'>m</b>"

    def test_markdown_parameter(self):
        assert render_atom({"name": "data", "type": {"names": ["Tree"]}}, MARKDOWN) == (
            "data: Tree"
        )
        assert (
            render_atom(
                {"name": "data", "type": {"names": ["Tree"]}, "optional": True}, MARKDOWN
            )
            == "data?: Tree"
        )
        assert (
            render_atom(
                {"name": "args", "type": {"names": ["number"]}, "variable": True},
                MARKDOWN,
            )
            == "...args: number"
        )


class TestSignatures:
    """Functions and typedefs."""

    def test_html_signature(self):
        assert render_atom(LEN) == (
            "<code>len(<b title='Tree'>data</b>)</code> → <em>number</em>"
        )

    def test_markdown_signature(self):
        assert render_atom(LEN, MARKDOWN) == "len(data: Tree) → _number_"

    def test_missing_return_defaults_to_void(self):
        assert render_atom({"kind": "function", "name": "noop"}) == (
            "<code>noop()</code> → <em>void</em>"
        )

    def test_return_type_links_when_asked(self):
        atom = {"kind": "function", "name": "empty", "returns": [{"type": {"names": ["Tree"]}}]}
        assert render_atom(atom, link=True) == (
            "<code>empty()</code> → <em><a href='#tree'>Tree</a></em>"
        )

    def test_deep_params_stay_out_of_signature(self):
        atom = {
            "kind": "function",
            "name": "f",
            "params": [
                {"name": "options", "type": {"names": ["Object"]}},
                {"name": "options.prefix", "type": {"names": ["string"]}},
            ],
        }
        assert render_atom(atom) == (
            "<code>f(<b title='Object'>options</b>)</code> → <em>void</em>"
        )

    def test_callback_typedef(self):
        atom = {
            "kind": "typedef",
            "name": "visitor",
            "params": [{"name": "key"}, {"name": "value"}],
        }
        assert render_atom(atom, MARKDOWN) == "visitor(key, value) → _void_"

    def test_object_typedef(self):
        atom = {
            "kind": "typedef",
            "name": "Point",
            "properties": [
                {"name": "x", "type": {"names": ["number"]}},
                {"name": "y", "type": {"names": ["number"]}},
            ],
        }
        assert render_atom(atom) == (
            "<code>{ <b title='number'>x</b>, <b title='number'>y</b> }</code>"
        )
        assert render_atom(atom, MARKDOWN) == "{ x: number, y: number }"
