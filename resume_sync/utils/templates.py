"""Contains utilities for rendering Jinja2 templates."""

from importlib import resources
from typing import Any

import jinja2
import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

TEMPLATES_PACKAGE = "resume_sync.templates"


def construct_jinja2_environment(autoescape: bool = False) -> jinja2.Environment:
    """Construct a Jinja2 environment.

    Undefined variables raise instead of rendering as empty strings.
    """
    jinja_env = jinja2.Environment(undefined=jinja2.StrictUndefined, autoescape=autoescape, keep_trailing_newline=True)
    return jinja_env


def construct_jinja2_template_from_string(template_string: str, environment: jinja2.Environment | None = None) -> jinja2.Template:
    """Construct a Jinja2 template from a string."""
    if environment is None:
        environment = construct_jinja2_environment()
    return environment.from_string(template_string)


def construct_jinja2_template_from_package(template_name: str, environment: jinja2.Environment | None = None) -> jinja2.Template:
    """Construct a Jinja2 template from a file shipped in the templates package."""
    if environment is None:
        environment = construct_jinja2_environment()
    try:
        template_content = resources.files(TEMPLATES_PACKAGE).joinpath(template_name).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.error("Jinja2 template not found", template_name=template_name)
        raise
    return environment.from_string(template_content)


def render_template(template: jinja2.Template, **context: Any) -> str:
    """Render a Jinja2 template against keyword context."""
    try:
        rendered_template = template.render(**context)
    except jinja2.UndefinedError as exc:
        logger.error("Failed to render template", context_keys=sorted(context), error=str(exc))
        raise
    return rendered_template
