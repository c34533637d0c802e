"""
Pytest fixtures for the backoffice page router tests.
"""

from datetime import datetime, timezone

import pytest

from backoffice import create_app
from backoffice.errors import RenderError, ViewNotFound


class FakeViews:
    """In-memory view resolver keyed by view name."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.rendered = []
        self.broken = set()

    def exists(self, key):
        return key in self.pages

    def render(self, key, **context):
        if key not in self.pages:
            raise ViewNotFound(key)
        if key in self.broken:
            raise RenderError(key, 'template failed')
        self.rendered.append(key)
        return self.pages[key]


class FixedClock:
    def __init__(self, instant):
        self.instant = instant

    def now(self):
        return self.instant


@pytest.fixture(scope='function')
def app():
    """Create application for testing."""
    application = create_app('testing')

    with application.app_context():
        yield application


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def fake_views(app):
    """Replace the template-backed resolver with an in-memory one."""
    views = FakeViews({
        'index': '<h1>index</h1>',
        'pages-404': '<h1>not found</h1>',
        'dashboard': '<h1>dashboard</h1>',
        'reports/monthly': '<h1>monthly report</h1>',
    })
    app.extensions['views'] = views
    return views


@pytest.fixture(scope='function')
def fixed_clock(app):
    """Pin the health check clock to a known instant."""
    clock = FixedClock(datetime(2024, 3, 1, 9, 30, 15, 123456, tzinfo=timezone.utc))
    app.extensions['clock'] = clock
    return clock
