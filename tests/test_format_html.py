"""Formatting of plain markup: indentation, text placement and attributes."""

import pytest

from heexfmt import Environment

from .builders import bare_attr, close, expr_attr, render, root_attr, string_attr, tag, text
from .conftest import assert_formatted

# Four attributes that fit in exactly 98 columns as a self-closing tag.
_FITS = [
    string_attr("foo", "..........."),
    string_attr("bar", "..............."),
    string_attr("baz", "............"),
    string_attr("qux", "..................."),
]

# Same, one character too long.
_TOO_LONG = [*_FITS[:3], string_attr("qux", "....................")]


class TestIndentation:
    """Nesting and blank-line handling."""

    def test_inline_markup_is_split_one_tag_per_line(self, env):
        tokens = [
            tag("section"),
            tag("div"),
            tag("h1"),
            text("Hi"),
            close("h1"),
            close("div"),
            close("section"),
            text("\n"),
        ]
        assert_formatted(
            env.format(tokens),
            "<section>\n  <div>\n    <h1>Hi</h1>\n  </div>\n</section>\n",
        )

    def test_removes_unwanted_empty_lines(self, env):
        tokens = [
            tag("section"),
            text("\n"),
            tag("div"),
            text("\n"),
            tag("h1"),
            text("    Hello"),
            close("h1"),
            text("\n"),
            tag("h2"),
            text("\nSub title\n"),
            close("h2"),
            text("\n"),
            close("div"),
            text("\n"),
            close("section"),
            text("\n\n"),
        ]
        expected = (
            "<section>\n"
            "  <div>\n"
            "    <h1>Hello</h1>\n"
            "    <h2>Sub title</h2>\n"
            "  </div>\n"
            "</section>\n"
        )
        assert_formatted(env.format(tokens), expected)

    def test_keeps_a_single_intentional_blank_line(self, env):
        tokens = [
            tag("p"),
            text("One"),
            close("p"),
            text("\n\n\n\n"),
            tag("p"),
            text("Two"),
            close("p"),
        ]
        assert env.format(tokens) == "<p>One</p>\n\n<p>Two</p>\n"

    def test_empty_elements_collapse(self, env):
        tokens = [
            tag("thead"),
            text("\n  "),
            tag("tr"),
            text("\n    "),
            tag("th"),
            text("Name"),
            close("th"),
            text("\n    "),
            tag("th"),
            close("th"),
            text("\n    "),
            tag("th"),
            text("\n    "),
            close("th"),
            text("\n  "),
            close("tr"),
            text("\n"),
            close("thead"),
        ]
        expected = (
            "<thead>\n"
            "  <tr>\n"
            "    <th>Name</th>\n"
            "    <th></th>\n"
            "    <th></th>\n"
            "  </tr>\n"
            "</thead>\n"
        )
        assert_formatted(env.format(tokens), expected)

    def test_void_elements_do_not_indent(self, env):
        link = tag(
            "link",
            string_attr("rel", "shortcut icon"),
            expr_attr("href", 'Routes.static_path(@conn, "/images/favicon.png")'),
            string_attr("type", "image/x-icon"),
        )
        tokens = [
            tag("div"),
            text("\n"),
            link,
            text("\n"),
            tag("p"),
            text("some text"),
            close("p"),
            text("\n"),
            tag("br"),
            text("\n"),
            tag("hr"),
            text("\n"),
            tag("input", string_attr("type", "text"), string_attr("value", "Foo Bar")),
            text("\n"),
            tag("img", string_attr("src", "./image.png")),
            text("\n"),
            close("div"),
        ]
        expected = (
            "<div>\n"
            "  <link\n"
            '    rel="shortcut icon"\n'
            '    href={Routes.static_path(@conn, "/images/favicon.png")}\n'
            '    type="image/x-icon"\n'
            "  >\n"
            "  <p>some text</p>\n"
            "  <br>\n"
            "  <hr>\n"
            '  <input type="text" value="Foo Bar">\n'
            '  <img src="./image.png">\n'
            "</div>\n"
        )
        assert_formatted(env.format(tokens), expected)

    def test_doctype_is_not_followed_by_a_blank_line(self, env):
        tokens = [
            text("<!DOCTYPE html>\n"),
            tag("html", string_attr("lang", "en")),
            text("\n  "),
            tag("head"),
            text("\n    "),
            tag("meta", string_attr("charset", "utf-8"), self_close=True),
            text("\n  "),
            close("head"),
            text("\n  "),
            tag("body"),
            text("\n    "),
            render("@inner_content"),
            text("\n  "),
            close("body"),
            text("\n"),
            close("html"),
            text("\n"),
        ]
        expected = (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "  <head>\n"
            '    <meta charset="utf-8" />\n'
            "  </head>\n"
            "  <body>\n"
            "    <%= @inner_content %>\n"
            "  </body>\n"
            "</html>\n"
        )
        assert_formatted(env.format(tokens), expected)


class TestTextPlacement:
    """Where text goes relative to the tag before it."""

    def test_short_text_stays_inline_with_attributeless_tag(self, env):
        assert env.format([tag("p"), text("\n  My title\n  "), close("p")]) == "<p>My title</p>\n"

    def test_text_after_tag_with_attributes_breaks(self, env):
        tokens = [
            tag("p", string_attr("class", "some-class")),
            text("Should break line"),
            close("p"),
        ]
        assert env.format(tokens) == '<p class="some-class">\n  Should break line\n</p>\n'

    def test_text_at_line_length_breaks(self, env):
        long_text = (
            "This is tooooooooooooooooooooooooooooooooooooooo looooooong "
            "annnnnnnnnnnnnnd should breeeeeak liines"
        )
        assert env.format([tag("p"), text(long_text), close("p")]) == f"<p>\n  {long_text}\n</p>\n"

    def test_configured_line_length_breaks_text(self):
        env = Environment(line_length=5)
        assert env.format([text("  "), tag("p"), text("My title"), close("p")]) == (
            "<p>\n  My title\n</p>\n"
        )

    def test_text_outside_tags_goes_on_its_own_line(self, env):
        tokens = [
            tag("p"),
            render("@user.name"),
            close("p"),
            text("\n  should not break when there it is not wrapped by any tags\n"),
        ]
        expected = (
            "<p>\n"
            "  <%= @user.name %>\n"
            "</p>\n"
            "should not break when there it is not wrapped by any tags\n"
        )
        assert_formatted(env.format(tokens), expected)

    def test_text_and_expressions_stay_on_one_line(self, env):
        tokens = [
            text("  "),
            tag("p"),
            text("\n    $\n    "),
            render("@product.value"),
            text(" in Dollars\n  "),
            close("p"),
            text("\n\n  "),
            tag("button"),
            text("\n    Submit\n  "),
            close("button"),
            text("\n"),
        ]
        assert_formatted(
            env.format(tokens),
            "<p>$ <%= @product.value %> in Dollars</p>\n\n<button>Submit</button>\n",
        )

    def test_long_content_splits_into_lines(self, env):
        tokens = [
            text("  "),
            tag("p"),
            tag("span"),
            text("this is a long long long long long looooooong text"),
            close("span"),
            render("@product.value"),
            text(" and more stuff over here"),
            close("p"),
            text("\n"),
        ]
        expected = (
            "<p>\n"
            "  <span>this is a long long long long long looooooong text</span>\n"
            "  <%= @product.value %> and more stuff over here\n"
            "</p>\n"
        )
        assert_formatted(env.format(tokens), expected)


class TestAttributes:
    """Attribute rendering and the wrap threshold."""

    def test_attributes_that_fit_stay_on_one_line(self, env):
        output = env.format([tag("Component", *_FITS, self_close=True), text("\n")])
        assert output == (
            '<Component foo="..........." bar="..............." '
            'baz="............" qux="..................." />\n'
        )
        assert len(output.rstrip("\n")) == 98

    def test_attributes_wrap_past_98_characters(self, env):
        expected = (
            "<Component\n"
            '  foo="..........."\n'
            '  bar="..............."\n'
            '  baz="............"\n'
            '  qux="...................."\n'
            "/>\n"
        )
        assert_formatted(env.format([tag("Component", *_TOO_LONG, self_close=True)]), expected)

    def test_wrapped_tag_content_is_indented(self, env):
        attrs = [*_TOO_LONG, string_attr("bla", "......")]
        tokens = [
            tag("div", *attrs),
            text("\n  "),
            tag("h1"),
            text("Title"),
            close("h1"),
            text("\n"),
            close("div"),
        ]
        expected = (
            "<div\n"
            '  foo="..........."\n'
            '  bar="..............."\n'
            '  baz="............"\n'
            '  qux="...................."\n'
            '  bla="......"\n'
            ">\n"
            "  <h1>Title</h1>\n"
            "</div>\n"
        )
        assert_formatted(env.format(tokens), expected)

    @pytest.mark.parametrize(
        "options",
        [{"line_length": 20}, {"heex_line_length": 20, "line_length": 2000}],
        ids=["line_length", "heex_line_length_wins"],
    )
    def test_line_length_is_configurable(self, options):
        env = Environment(**options)
        output = env.format([tag("Component", *_FITS, self_close=True)])
        assert output.startswith("<Component\n  foo=")
        assert output.endswith("\n/>\n")

    def test_single_attribute_never_wraps(self):
        env = Environment(line_length=10)
        output = env.format([tag("div", string_attr("class", "a very long class list"))])
        assert output == '<div class="a very long class list">\n'

    def test_attribute_kinds(self, env):
        tokens = [
            tag(
                "button",
                root_attr("build_phx_attrs_dynamically()"),
                string_attr("class", "btn-primary"),
                expr_attr("phx-click", "@click"),
                bare_attr("disabled"),
            ),
            text("Test"),
            close("button"),
        ]
        assert env.format(tokens) == (
            '<button {build_phx_attrs_dynamically()} class="btn-primary" '
            "phx-click={@click} disabled>\n"
            "  Test\n"
            "</button>\n"
        )

    def test_multiline_attributes_are_joined(self, env):
        tokens = [
            tag("section", string_attr("id", "id"), string_attr("phx-hook", "PhxHook")),
            text("\n  "),
            tag(".component", expr_attr("image_url", "@url"), self_close=True),
            text("\n"),
            close("section"),
            text("\n"),
        ]
        expected = (
            '<section id="id" phx-hook="PhxHook">\n'
            "  <.component image_url={@url} />\n"
            "</section>\n"
        )
        assert_formatted(env.format(tokens), expected)

    @pytest.mark.parametrize(
        "tokens, expected",
        [
            ([tag("div", self_close=True), text("\n")], "<div />\n"),
            (
                [tag(".component", string_attr("with", "attribute"), self_close=True)],
                '<.component with="attribute" />\n',
            ),
        ],
    )
    def test_single_line_inputs_are_unchanged(self, env, tokens, expected):
        assert env.format(tokens) == expected
