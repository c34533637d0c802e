# File: backoffice/extensions.py
"""
Application extensions initializer.

Registers the per-app collaborators the handlers depend on: the view
resolver and the clock. Provides both initialization at app startup and a
lazy fallback for safe access within request contexts.
"""

from flask import Flask, current_app

from .utils.clock import SystemClock
from .utils.views import ViewResolver

_VIEWS_KEY = 'views'  # Keys for app.extensions registry
_CLOCK_KEY = 'clock'


def init_extensions(app: Flask) -> None:
    """Initialize application extensions.

    Called once at app startup. Registers the view resolver and clock into
    the Flask app.extensions namespace. Entries already present (e.g. set by
    tests before startup) are left alone.
    """
    # Ensure extensions dict exists
    if not hasattr(app, 'extensions') or app.extensions is None:
        app.extensions = {}

    app.extensions.setdefault(
        _VIEWS_KEY, ViewResolver(app, suffix=app.config.get('VIEW_SUFFIX', '.html'))
    )
    app.extensions.setdefault(_CLOCK_KEY, SystemClock())


def get_views() -> ViewResolver:
    """Return the view resolver from the current app context.

    Always use this accessor instead of constructing resolvers in handlers.

    Behavior:
        - Normal case: returns `app.extensions['views']`
        - Fallback: if not initialized, performs a lazy init based on current config
    """
    exts = getattr(current_app, 'extensions', {}) or {}
    views = exts.get(_VIEWS_KEY)

    if views is None:
        app = current_app._get_current_object()
        app.logger.debug("View resolver not initialized, creating lazily")
        views = ViewResolver(app, suffix=app.config.get('VIEW_SUFFIX', '.html'))
        app.extensions[_VIEWS_KEY] = views

    return views


def get_clock() -> SystemClock:
    """Return the clock from the current app context, lazily created if missing."""
    exts = getattr(current_app, 'extensions', {}) or {}
    clock = exts.get(_CLOCK_KEY)

    if clock is None:
        current_app.logger.debug("Clock not initialized, creating lazily")
        clock = SystemClock()
        current_app.extensions[_CLOCK_KEY] = clock

    return clock
