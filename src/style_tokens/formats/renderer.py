"""
Jinja2 template renderer for generated platform source.

Sets up the Jinja2 environment with literal-formatting filters and
template loading from the templates/ directory. Formats render through
here so conversion code never builds target syntax by hand.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def _swift_float_filter(value: Any) -> str:
    """Render a number as a Swift floating-point literal (28 -> ``28.0``)."""
    number = float(value)
    if math.isnan(number):
        return ".nan"
    if math.isinf(number):
        return ".infinity" if number > 0 else "-.infinity"
    return repr(number)


# Characters that must be escaped inside a Swift string literal
_SWIFT_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _swift_string_filter(value: Any) -> str:
    """Render a value as a quoted Swift string literal."""
    text = "".join(_SWIFT_STRING_ESCAPES.get(ch, ch) for ch in str(value))
    return f'"{text}"'


def _comment_line(text: str) -> str:
    if text.startswith("//"):
        return text
    return f"// {text}" if text else "//"


def _comment_filter(line: Any) -> str:
    """Turn header text into ``//`` comments, leaving existing comments alone."""
    lines = str(line).splitlines() or [""]
    return "\n".join(_comment_line(text) for text in lines)


def create_jinja_env(templates_dir: Path | None = None) -> Environment:
    """Create and configure the Jinja2 environment.

    Args:
        templates_dir: Optional override for the template directory, for
            projects that ship their own copies of the format templates.
    """
    loader = FileSystemLoader(str(templates_dir or TEMPLATES_DIR))

    env = Environment(
        loader=loader,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )

    env.filters["swift_float"] = _swift_float_filter
    env.filters["swift_string"] = _swift_string_filter
    env.filters["comment"] = _comment_filter

    return env


class TemplateRenderer:
    """Renders named templates with a shared environment."""

    def __init__(self, env: Environment | None = None):
        self.env = env or create_jinja_env()

    def render(self, template_name: str, **context: Any) -> str:
        return self.env.get_template(template_name).render(**context)
