# File: backoffice/utils/views.py
"""
View resolver.

Maps view keys to Jinja templates and renders them, reporting failures as
ViewNotFound or RenderError.
"""

from flask import Flask, render_template
from jinja2 import TemplateError, TemplateNotFound

from ..errors import RenderError, ViewNotFound


class ViewResolver:
    """Look up and render page templates by view key.

    A view key is the logical page name (``"index"``, ``"pages-404"``,
    ``"reports/monthly"``); the template file is the key plus the configured
    suffix, resolved through the application's Jinja loader.
    """

    def __init__(self, app: Flask, suffix: str = ".html") -> None:
        self.app = app
        self.suffix = suffix

    def template_name(self, key: str) -> str:
        return f"{key.strip('/')}{self.suffix}"

    def exists(self, key: str) -> bool:
        if not key.strip("/"):
            return False
        env = self.app.jinja_env
        try:
            env.loader.get_source(env, self.template_name(key))
        except TemplateNotFound:
            return False
        return True

    def render(self, key: str, **context) -> str:
        name = self.template_name(key)
        try:
            return render_template(name, **context)
        except TemplateNotFound as exc:
            # Only the page itself being absent counts as "not found";
            # a missing include or parent is a broken template.
            if exc.name == name:
                raise ViewNotFound(key) from exc
            raise RenderError(key, f"missing template {exc.name!r}") from exc
        except TemplateError as exc:
            raise RenderError(key, str(exc)) from exc
        except Exception as exc:
            # Errors raised from template code, e.g. url_for BuildError
            raise RenderError(key, f"{type(exc).__name__}: {exc}") from exc
