"""Route table mapping request paths to page functions.

A page function receives a fresh MarkupBuilder and drives it. The table
finalizes the builder and returns the fragment. Resolution is an exact
string match; anything else renders the not-found fragment.

Thread Safety:
RouteTable is immutable after creation and builds a new MarkupBuilder
for every render. Safe to share. Use RouteTableBuilder for mutable
construction.

Example:
    >>> builder = RouteTableBuilder()
    >>> @builder.page("/hello")
    ... def hello(b):
    ...     b.open("p").text("hi").close()
    >>> table = builder.build()
    >>> table.render("/hello")
    '<p>hi</p>'
    >>> table.render("/nope")
    '<div>404 - Page not found</div>'
"""

from __future__ import annotations

from collections.abc import Callable

from fsf.builder import MarkupBuilder
from fsf.utils.logger import get_logger

logger = get_logger(__name__)

PageFunction = Callable[[MarkupBuilder], None]

NOT_FOUND_FRAGMENT = "<div>404 - Page not found</div>"


class RouteTable:
    """Immutable mapping of request paths to page functions."""

    __slots__ = ("_pages",)

    def __init__(self, pages: dict[str, PageFunction]) -> None:
        """Initialize table with a pre-built mapping.

        Use RouteTableBuilder to create instances.
        """
        self._pages = pages

    def get(self, path: str) -> PageFunction | None:
        """Get the page function for an exact path, or None."""
        return self._pages.get(path)

    def render(self, path: str) -> str:
        """Render the fragment for a request path.

        Args:
            path: Request path, matched exactly

        Returns:
            The page's fragment, or NOT_FOUND_FRAGMENT if unmatched
        """
        page = self._pages.get(path)
        if page is None:
            logger.debug("No page for %s", path)
            return NOT_FOUND_FRAGMENT
        builder = MarkupBuilder()
        page(builder)
        if builder.depth:
            logger.debug("Page %s left %d element(s) open", path, builder.depth)
        return builder.finalize()

    @property
    def paths(self) -> frozenset[str]:
        """Get all registered paths."""
        return frozenset(self._pages)

    def __contains__(self, path: str) -> bool:
        return path in self._pages

    def __len__(self) -> int:
        return len(self._pages)


class RouteTableBuilder:
    """Mutable builder for RouteTable.

    Example:
        >>> builder = RouteTableBuilder()
        >>> builder.register("/", index)
        >>> table = builder.build()
    """

    __slots__ = ("_pages",)

    def __init__(self) -> None:
        self._pages: dict[str, PageFunction] = {}

    def register(self, path: str, page: PageFunction) -> RouteTableBuilder:
        """Register a page function for a path.

        Returns:
            Self for chaining

        Raises:
            ValueError: If path does not start with "/" or is already registered
        """
        if not path.startswith("/"):
            msg = f"Route path must start with '/': {path!r}"
            raise ValueError(msg)
        if path in self._pages:
            existing = self._pages[path]
            msg = f"Route '{path}' already registered by {getattr(existing, '__name__', existing)!r}"
            raise ValueError(msg)
        self._pages[path] = page
        return self

    def page(self, path: str) -> Callable[[PageFunction], PageFunction]:
        """Decorator form of register()."""

        def decorator(func: PageFunction) -> PageFunction:
            self.register(path, func)
            return func

        return decorator

    def build(self) -> RouteTable:
        """Build immutable table from registered pages."""
        return RouteTable(dict(self._pages))

    def __len__(self) -> int:
        return len(self._pages)


def index(b: MarkupBuilder) -> None:
    """Default landing page."""
    b.open("div")
    b.open("h1").text("Hello from fsf").close()
    b.open("p").text("Edit your routes to replace this page.").close()
    b.close()


def create_default_routes() -> RouteTable:
    """Build the route table served when none is supplied."""
    return RouteTableBuilder().register("/", index).build()


__all__ = [
    "NOT_FOUND_FRAGMENT",
    "PageFunction",
    "RouteTable",
    "RouteTableBuilder",
    "create_default_routes",
    "index",
]
