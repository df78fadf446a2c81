# webapp/renderer.py

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from flask import Flask, current_app
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from werkzeug.exceptions import NotFound

from .errors import ConfigError

logger = logging.getLogger(__name__)


def _jinja2(root: str) -> Environment:
    return Environment(
        loader=FileSystemLoader(root),
        autoescape=select_autoescape(["html", "htm", "xml"]),
    )


ENGINES: Dict[str, Callable[[str], Environment]] = {
    "jinja2": _jinja2,
}


class ViewRenderer:
    """
    Server-side templates from a single root directory.

    Templates are looked up on render, not here: a missing one raises
    TemplateNotFound for that request only.
    """

    def __init__(self, root: str, engine: str = "jinja2"):
        if engine not in ENGINES:
            raise ConfigError(
                f"Unknown view engine {engine!r} (supported: {sorted(ENGINES)})"
            )
        self.root = root
        self.engine = engine
        self.env = ENGINES[engine](root)

    def render(self, template_name: str, data: Optional[Mapping[str, Any]] = None) -> str:
        template = self.env.get_template(template_name)
        return template.render(**dict(data or {}))

    def init_app(self, app: Flask) -> None:
        app.register_error_handler(TemplateNotFound, _template_not_found)


def _template_not_found(exc: TemplateNotFound):
    logger.info("Template not found: %s", exc.name)
    # hand it to whatever 404 handling the app has
    return current_app.handle_http_exception(
        NotFound(description=f"Template {exc.name!r} not found")
    )
