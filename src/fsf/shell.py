"""Page shell: the document a fragment is embedded into.

The shell template is compiled once, when a PageShell is built from the
ServerConfig, and reused for every response. The fragment is inserted
verbatim. The title is escaped. Hydration data is emitted as JSON in an
inline script before the bundle script, or omitted when None.

Example:
    >>> shell = PageShell(ServerConfig(title="Demo"))
    >>> page = shell.render("<div>hi</div>")
    >>> '<div id="root"><div>hi</div></div>' in page
    True
"""

from __future__ import annotations

import json
from typing import Any

from jinja2 import Environment, select_autoescape
from markupsafe import Markup

from fsf.config import ServerConfig
from fsf.manifest import Manifest

SHELL_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ title }}</title>
{% if import_map %}<script type="importmap">{{ import_map }}</script>
{% endif %}</head>
<body>
<div id="root">{{ fragment }}</div>
{% if data is not none %}<script>window.__FSF_DATA__ = {{ data }};</script>
{% endif %}<script type="module" src="{{ script }}"></script>
</body>
</html>
"""


def script_json(value: Any) -> Markup:
    """Serialize a value as JSON safe to place inside a script element."""
    text = json.dumps(value, separators=(",", ":"), sort_keys=True)
    text = text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    return Markup(text)


class PageShell:
    """Compiled page shell bound to one configuration.

    Thread Safety:
        Immutable after construction. Safe to share across requests.
    """

    __slots__ = ("_config", "_manifest", "_template", "_import_map")

    def __init__(self, config: ServerConfig, manifest: Manifest | None = None) -> None:
        self._config = config
        self._manifest = manifest or Manifest()
        env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))
        self._template = env.from_string(SHELL_TEMPLATE)
        self._import_map = (
            script_json({"imports": self._manifest.import_map})
            if self._manifest.import_map
            else None
        )

    @property
    def config(self) -> ServerConfig:
        return self._config

    def script_for(self, path: str | None) -> str:
        """Return the script URL for a route, falling back to the default bundle."""
        if path is not None:
            script = self._manifest.client_script(path)
            if script is not None:
                return script
        return self._config.bundle_script

    def render(
        self,
        fragment: str,
        *,
        path: str | None = None,
        title: str | None = None,
        data: Any = None,
    ) -> str:
        """Embed a fragment into the shell.

        Args:
            fragment: Builder output, inserted without escaping
            path: Request path, used to pick the route's client bundle
            title: Page title (defaults to config.title)
            data: JSON-serializable hydration data, or None to omit

        Returns:
            Complete HTML document
        """
        return self._template.render(
            title=self._config.title if title is None else title,
            fragment=Markup(fragment),
            data=None if data is None else script_json(data),
            import_map=self._import_map,
            script=self.script_for(path),
        )


__all__ = [
    "SHELL_TEMPLATE",
    "PageShell",
    "script_json",
]
