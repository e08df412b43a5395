"""
fsf: call-ordered HTML assembly and a thin page server.

The MarkupBuilder keeps a stack of open elements and one append-only
buffer. Page functions drive a builder; the route table turns them into
fragments; the page shell wraps fragments into documents; the FastAPI
app serves them next to static assets.

Quick Start:
    >>> from fsf import MarkupBuilder
    >>> b = MarkupBuilder()
    >>> _ = b.open("div").text("hi").close()
    >>> b.finalize()
    '<div>hi</div>'

    >>> from fsf import RouteTableBuilder, ServerConfig, create_app
    >>> routes = RouteTableBuilder().register("/", lambda b: b.text("home")).build()
    >>> app = create_app(ServerConfig(), routes)

Installation:
    pip install fsf
"""

from fsf.builder import MarkupBuilder
from fsf.config import ServerConfig
from fsf.errors import ConfigError, FsfError, ManifestError, ServeError
from fsf.harness import TestRunner, collect_tests, run_directory
from fsf.manifest import Manifest, ManifestRoute, load_manifest
from fsf.routes import (
    NOT_FOUND_FRAGMENT,
    RouteTable,
    RouteTableBuilder,
    create_default_routes,
)
from fsf.shell import PageShell

__version__ = "0.1.0"


def __getattr__(name: str):
    # Lazy so importing the builder does not pull in FastAPI.
    if name in ("create_app", "serve"):
        import fsf.app as app_module

        return getattr(app_module, name)
    raise AttributeError(f"module 'fsf' has no attribute {name!r}")


__all__ = [
    "NOT_FOUND_FRAGMENT",
    "ConfigError",
    "FsfError",
    "Manifest",
    "ManifestError",
    "ManifestRoute",
    "MarkupBuilder",
    "PageShell",
    "RouteTable",
    "RouteTableBuilder",
    "ServeError",
    "ServerConfig",
    "TestRunner",
    "__version__",
    "collect_tests",
    "create_app",
    "create_default_routes",
    "load_manifest",
    "run_directory",
    "serve",
]
