"""Jinja2 rendering for email bodies and generated documents."""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

_environment: Environment | None = None


def get_environment() -> Environment:
    """Get or create the shared template environment.

    Autoescaping is on for every .html template, so user-supplied values are
    escaped unless a template explicitly marks them ``| safe``.
    """
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _environment


def render_template(template_name: str, **context: Any) -> str:
    return get_environment().get_template(template_name).render(**context)
