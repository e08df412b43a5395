"""Server configuration for fsf.

ServerConfig is built once at process start and handed explicitly to
the page shell, the application factory and the server. There is no
module-level active config.

Usage:
    config = ServerConfig.from_env()
    app = create_app(config)

Environment variables named ``FSF_<FIELD>`` (e.g. ``FSF_PORT``) override
the defaults in from_env().

"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

from fsf.errors import ConfigError

ENV_PREFIX = "FSF_"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Immutable server configuration.

    Attributes:
        host: Interface to bind
        port: TCP port to bind
        static_dir: Directory served unmodified under static_prefix
        static_prefix: URL prefix for static assets
        manifest_path: Client build manifest (manifest.json)
        title: Page title placed in the page shell
        bundle_script: Script URL used when a route has no client bundle
        debug: Log at DEBUG level and report server errors verbosely

    """

    host: str = "127.0.0.1"
    port: int = 8080
    static_dir: Path = Path("dist")
    static_prefix: str = "/static"
    manifest_path: Path = Path("dist/manifest.json")
    title: str = "fsf"
    bundle_script: str = "/static/bundle.js"
    debug: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, object]) -> ServerConfig:
        """Create ServerConfig from a dictionary.

        Unknown keys are ignored. Values are coerced to the field type.

        Example:
            >>> ServerConfig.from_dict({"port": "9000", "bogus": 1}).port
            9000

        Raises:
            ConfigError: If a value cannot be coerced
        """
        valid = {f.name: f for f in fields(cls)}
        values = {k: _coerce(k, valid[k].type, v) for k, v in config_dict.items() if k in valid}
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Create ServerConfig from ``FSF_*`` environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ConfigError: If a variable cannot be coerced
        """
        environ = os.environ if environ is None else environ
        found: dict[str, object] = {}
        for f in fields(cls):
            key = f"{ENV_PREFIX}{f.name.upper()}"
            if key in environ:
                found[f.name] = environ[key]
        return cls.from_dict(found)


def _coerce(key: str, annotation: object, value: object) -> object:
    # Annotations are strings under `from __future__ import annotations`.
    kind = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
    if kind == "bool":
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUTHY:
            return True
        if text in _FALSY:
            return False
        raise ConfigError(key, value, "expected a boolean")
    if kind == "int":
        if isinstance(value, bool):
            raise ConfigError(key, value, "expected an integer")
        try:
            return int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError) as e:
            raise ConfigError(key, value, "expected an integer") from e
    if kind == "Path":
        if not isinstance(value, (str, os.PathLike)):
            raise ConfigError(key, value, "expected a path")
        return Path(value)
    if not isinstance(value, str):
        raise ConfigError(key, value, "expected a string")
    return value


__all__ = [
    "ENV_PREFIX",
    "ServerConfig",
]
