"""
Shared test fixtures and sample controllers for the Harrier test suite.
"""

import pytest
from jinja2 import DictLoader

from harrier import Application, Controller, DispatchConfig
from harrier.testing import RecordingResponse, StubRequest
from harrier.views import Jinja2View


# ============================================================================
# Sample controllers
# ============================================================================


class ArticlesController(Controller):
    """Full-featured controller: context carrier, init hook, forwards."""

    def __init__(self, app):
        super().__init__(app)
        self.init_calls = 0
        self.seen = []

    def init(self):
        self.init_calls += 1
        self.seen.append(("init", self.request, self.response))

    async def index(self):
        return self.response.write("index")

    async def show(self, article_id, slug=None):
        self.seen.append(("show", article_id, slug))
        return self.response.write(f"article {article_id}")

    def edit(self, article_id):
        return self.response.write(f"edit {article_id}")

    async def latest(self):
        return await self.forward("show", [99, "latest"])

    async def archive(self):
        return await self.forward("latest")

    async def missing(self):
        return await self.forward("does_not_exist")

    def _helper(self):
        return "private"


class PlainController:
    """Stateless controller with no optional capabilities."""

    def hello(self, name):
        return f"hello {name}"

    async def echo(self, *values):
        return list(values)


class Widget:
    """Stateless class that breaks the naming convention."""

    def ping(self):
        return "pong"


# ============================================================================
# Fixtures
# ============================================================================


TEMPLATES = {
    "articles/show.html": "<h1>{{ title }}</h1>",
    "hello.txt": "Hello {{ name }}!",
}


@pytest.fixture
def view():
    return Jinja2View(loader=DictLoader(TEMPLATES))


@pytest.fixture
def app(view):
    return Application(
        container={"articles": {"1": "First"}},
        view=view,
        config=DispatchConfig(),
    )


@pytest.fixture
def stub_request():
    return StubRequest(
        query={"page": "2"},
        body={"title": "Hello", "_METHOD": "PUT"},
        headers={"X-Requested-With": "XMLHttpRequest"},
        cookies={"theme": "dark"},
    )


@pytest.fixture
def response():
    return RecordingResponse()


@pytest.fixture
def articles(app):
    return ArticlesController(app)
