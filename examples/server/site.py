"""A two-page site served with the page shell.

Run:
    python examples/server/site.py
"""

from fsf import MarkupBuilder, RouteTableBuilder, ServerConfig, serve
from fsf.utils.logger import configure_logging

routes = RouteTableBuilder()


@routes.page("/")
def home(b: MarkupBuilder) -> None:
    with b.element("main"):
        b.open("h1").text("Home").close()
        b.open("p").text("Welcome.").close()


@routes.page("/about")
def about(b: MarkupBuilder) -> None:
    with b.element("main"):
        b.open("h1").text("About").close()


if __name__ == "__main__":
    config = ServerConfig.from_env()
    configure_logging(config.debug)
    serve(config, routes.build())
