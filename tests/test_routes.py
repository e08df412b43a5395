"""Tests for the route table."""

from __future__ import annotations

import pytest

from fsf.builder import MarkupBuilder
from fsf.routes import (
    NOT_FOUND_FRAGMENT,
    RouteTableBuilder,
    create_default_routes,
)


def _about(b: MarkupBuilder) -> None:
    b.open("section").open("h2").text("About").close().close()


class TestRouteTable:
    """Exact-match resolution with a literal fallback."""

    def test_render_registered_page(self) -> None:
        table = RouteTableBuilder().register("/about", _about).build()
        assert table.render("/about") == "<section><h2>About</h2></section>"

    def test_unmatched_path_renders_not_found(self) -> None:
        table = RouteTableBuilder().register("/about", _about).build()
        assert table.render("/missing") == NOT_FOUND_FRAGMENT
        assert NOT_FOUND_FRAGMENT == "<div>404 - Page not found</div>"

    def test_match_is_exact(self) -> None:
        table = RouteTableBuilder().register("/about", _about).build()
        assert table.render("/about/") == NOT_FOUND_FRAGMENT
        assert table.render("/ABOUT") == NOT_FOUND_FRAGMENT
        assert table.render("/abou") == NOT_FOUND_FRAGMENT

    def test_each_render_uses_fresh_builder(self) -> None:
        seen: list[MarkupBuilder] = []

        def page(b: MarkupBuilder) -> None:
            seen.append(b)
            b.text("x")

        table = RouteTableBuilder().register("/", page).build()
        assert table.render("/") == "x"
        assert table.render("/") == "x"
        assert seen[0] is not seen[1]

    def test_unclosed_page_is_returned_as_is(self) -> None:
        table = RouteTableBuilder().register("/", lambda b: b.open("div").text("x")).build()
        assert table.render("/") == "<div>x"

    def test_container_protocol(self) -> None:
        table = RouteTableBuilder().register("/a", _about).register("/b", _about).build()
        assert "/a" in table
        assert "/c" not in table
        assert len(table) == 2
        assert table.paths == frozenset({"/a", "/b"})
        assert table.get("/a") is _about
        assert table.get("/c") is None


class TestRouteTableBuilder:
    """Registration rules."""

    def test_decorator_registers_and_returns_function(self) -> None:
        builder = RouteTableBuilder()

        @builder.page("/hello")
        def hello(b: MarkupBuilder) -> None:
            b.open("p").text("hi").close()

        assert hello.__name__ == "hello"
        assert builder.build().render("/hello") == "<p>hi</p>"

    def test_duplicate_path_rejected(self) -> None:
        builder = RouteTableBuilder().register("/", _about)
        with pytest.raises(ValueError, match="already registered"):
            builder.register("/", _about)

    def test_relative_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="must start with '/'"):
            RouteTableBuilder().register("about", _about)

    def test_built_table_is_independent(self) -> None:
        builder = RouteTableBuilder().register("/a", _about)
        table = builder.build()
        builder.register("/b", _about)
        assert "/b" not in table
        assert len(builder) == 2


class TestDefaultRoutes:
    def test_index_page(self) -> None:
        table = create_default_routes()
        html = table.render("/")
        assert html.startswith("<div><h1>")
        assert html.endswith("</p></div>")
