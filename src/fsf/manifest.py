"""Client build manifest.

The client build writes ``manifest.json`` next to its bundles::

    {
      "routes": [
        {"path": "/", "clientJS": "/static/routes/index.js", "component": "index"}
      ],
      "importMap": {"react": "/static/lib/react.js"}
    }

The page shell uses it to pick the script for a route and to emit the
import map.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fsf.errors import ManifestError
from fsf.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ManifestRoute:
    """One route entry from the manifest."""

    path: str
    client_js: str
    component: str


@dataclass(frozen=True, slots=True)
class Manifest:
    """Parsed build manifest.

    Attributes:
        routes: Route entries in file order
        import_map: Bare module specifier to URL

    """

    routes: tuple[ManifestRoute, ...] = ()
    import_map: dict[str, str] = field(default_factory=dict)

    def client_script(self, path: str) -> str | None:
        """Return the client bundle URL for a request path, or None."""
        for route in self.routes:
            if route.path == path:
                return route.client_js
        return None

    @classmethod
    def from_dict(cls, data: Any, source: str | None = None) -> Manifest:
        """Build a Manifest from decoded JSON.

        Raises:
            ManifestError: If the structure is not a manifest
        """
        if not isinstance(data, dict):
            raise ManifestError("manifest must be a JSON object", source)

        entries = data.get("routes", [])
        if not isinstance(entries, list):
            raise ManifestError("routes must be an array", source)

        routes = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ManifestError(f"routes[{i}] must be an object", source)
            for key in ("path", "clientJS"):
                if key not in entry:
                    raise ManifestError(f"routes[{i}] missing key {key!r}", source)
            routes.append(
                ManifestRoute(
                    path=_string(entry["path"], f"routes[{i}].path", source),
                    client_js=_string(entry["clientJS"], f"routes[{i}].clientJS", source),
                    component=_string(
                        entry.get("component", ""), f"routes[{i}].component", source
                    ),
                )
            )

        import_map = data.get("importMap", {})
        if not isinstance(import_map, dict):
            raise ManifestError("importMap must be an object", source)

        return cls(
            routes=tuple(routes),
            import_map={
                k: _string(v, f"importMap[{k!r}]", source) for k, v in import_map.items()
            },
        )


def _string(value: Any, where: str, source: str | None) -> str:
    if not isinstance(value, str):
        raise ManifestError(f"{where} must be a string, got {type(value).__name__}", source)
    return value


def load_manifest(path: Path | str) -> Manifest:
    """Load a manifest file.

    A missing file yields an empty manifest.

    Args:
        path: Path to manifest.json

    Raises:
        ManifestError: If the file is not valid JSON or not a manifest
    """
    path = Path(path)
    if not path.is_file():
        logger.info("No manifest at %s, using default bundle", path)
        return Manifest()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ManifestError(f"not UTF-8: {e}", str(path)) from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"invalid JSON: {e}", str(path)) from e

    manifest = Manifest.from_dict(data, str(path))
    logger.info("Loaded manifest %s (%d routes)", path, len(manifest.routes))
    return manifest


__all__ = [
    "Manifest",
    "ManifestRoute",
    "load_manifest",
]
