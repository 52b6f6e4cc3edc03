"""Tests for the Jinja2 renderer and its filters."""

from __future__ import annotations

import math

import pytest

from style_tokens.formats.renderer import TemplateRenderer, create_jinja_env


class TestFilters:
    @pytest.fixture
    def env(self):
        return create_jinja_env()

    @pytest.mark.parametrize(
        "value, expected",
        [(28, "28.0"), (1.35, "1.35"), (-0.56, "-0.56"), (0, "0.0"), (math.nan, ".nan")],
    )
    def test_swift_float(self, env, value: float, expected: str) -> None:
        assert env.filters["swift_float"](value) == expected

    def test_swift_string_escapes(self, env) -> None:
        assert env.filters["swift_string"]('Fancy "Sans"') == '"Fancy \\"Sans\\""'

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Line\nBreak", '"Line\\nBreak"'),
            ("Carriage\rReturn", '"Carriage\\rReturn"'),
            ("Tab\tbed", '"Tab\\tbed"'),
            ("Back\\slash", '"Back\\\\slash"'),
        ],
    )
    def test_swift_string_escapes_control_characters(self, env, value: str, expected: str) -> None:
        assert env.filters["swift_string"](value) == expected

    def test_comment(self, env) -> None:
        assert env.filters["comment"]("Generated") == "// Generated"
        assert env.filters["comment"]("// kept") == "// kept"
        assert env.filters["comment"]("") == "//"

    def test_comment_multiline(self, env) -> None:
        assert env.filters["comment"]("one\n// two\nthree") == "// one\n// two\n// three"


class TestTemplateRenderer:
    def test_custom_template_dir(self, tmp_path) -> None:
        (tmp_path / "hello.txt.jinja").write_text("size: {{ size | swift_float }}\n")

        renderer = TemplateRenderer(create_jinja_env(tmp_path))

        assert renderer.render("hello.txt.jinja", size=12) == "size: 12.0\n"

    def test_html_named_template_is_not_escaped(self, tmp_path) -> None:
        """Generated source must come out verbatim whatever the template is called."""
        (tmp_path / "font.html").write_text('let name = {{ name | swift_string }} // {{ note }}\n')

        renderer = TemplateRenderer(create_jinja_env(tmp_path))
        output = renderer.render("font.html", name="Fancy", note="a < b & c")

        assert output == 'let name = "Fancy" // a < b & c\n'
