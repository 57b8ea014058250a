"""Configuration loader for statful-client.

``ConfigLoader`` resolves a ``ClientConfiguration`` from a YAML or JSON
file, from ``STATFUL_*`` environment variables, or by auto-discovery.

A config file may hold the client settings at the top level or under a
``statful:`` section, so the client can share an application's existing
config file::

    # app.yaml
    database:
      url: postgres://...
    statful:
      namespace: checkout
      tags: {env: prod}
"""
from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from statful.config.defaults import DEFAULT_CONFIG
from statful.config.schema import validate_config
from statful.schema.config import ClientConfiguration
from statful.schema.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Ordered list of paths searched by load_auto()
_AUTO_SEARCH_PATHS: tuple[str, ...] = (
    "statful.yaml",
    "statful.yml",
    "statful.json",
    ".statful.yaml",
    ".statful.yml",
    ".statful.json",
)

_SECTION_KEY = "statful"

_PARSERS: dict[str, tuple[Callable[[Any], Any], type[Exception]]] = {
    ".json": (json.load, json.JSONDecodeError),
    ".yaml": (yaml.safe_load, yaml.YAMLError),
    ".yml": (yaml.safe_load, yaml.YAMLError),
}


def _client_section(raw: object) -> dict[str, object]:
    """Return the ``statful:`` section of *raw*, or *raw* itself."""
    if not isinstance(raw, dict):
        return {}
    section = raw.get(_SECTION_KEY)
    if isinstance(section, dict):
        return dict(section)
    return dict(raw)


class ConfigLoader:
    """Loads ``ClientConfiguration`` from files and the environment.

    All loader methods return a validated ``ClientConfiguration`` and raise
    ``ConfigurationError`` on failure.

    Examples
    --------
    >>> loader = ConfigLoader()
    >>> loader.load_env(prefix="STATFUL_DOCTEST_").namespace
    'application'
    """

    def load(self, path: str | Path) -> ClientConfiguration:
        """Load a config file, parsed as JSON for ``.json`` and YAML otherwise.

        Raises
        ------
        ConfigurationError
            If the file is missing, cannot be parsed, or fails validation.
        """
        resolved = Path(path)
        if not resolved.exists():
            raise ConfigurationError(
                f"Config file not found: {resolved}",
                context={"path": str(resolved)},
            )

        parse, parse_error = _PARSERS.get(resolved.suffix.lower(), _PARSERS[".yaml"])
        try:
            with resolved.open(encoding="utf-8") as fh:
                raw = parse(fh)
        except parse_error as exc:
            raise ConfigurationError(
                f"Failed to parse config at {resolved}: {exc}",
                context={"path": str(resolved)},
            ) from exc

        logger.debug("Loaded statful config from %s", resolved)
        return validate_config(_client_section(raw))

    def load_env(self, prefix: str = "STATFUL_") -> ClientConfiguration:
        """Build configuration from environment variables.

        See :meth:`~statful.schema.config.ClientConfiguration.from_env` for
        the variable mapping rules.
        """
        try:
            config = ClientConfiguration.from_env(prefix=prefix)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid {prefix}* environment configuration: {exc}",
                context={"prefix": prefix, "errors": exc.errors()},
            ) from exc
        logger.debug("Loaded config from environment with prefix %r", prefix)
        return config

    def load_auto(
        self,
        search_dir: str | Path | None = None,
        env_prefix: str = "STATFUL_",
    ) -> ClientConfiguration:
        """Auto-discover and load configuration.

        Discovery order:

        1. The file named by ``<env_prefix>CONFIG`` (e.g. ``STATFUL_CONFIG``).
           A broken file named there is an error, not a fallback.
        2. ``statful.yaml``, ``statful.yml``, ``statful.json`` and hidden
           variants in *search_dir* (defaults to ``cwd``).  Unreadable
           candidates are skipped with a warning.
        3. ``DEFAULT_CONFIG``.

        Environment variables with *env_prefix* are then overlaid.
        """
        base_config = self._discover(search_dir, env_prefix)

        if any(k.startswith(env_prefix) for k in os.environ):
            base_config = base_config.merge(self.load_env(prefix=env_prefix))
            logger.debug("Applied environment variable overlay.")

        return base_config

    def _discover(self, search_dir: str | Path | None, env_prefix: str) -> ClientConfiguration:
        pointer = os.environ.get(f"{env_prefix}CONFIG")
        if pointer:
            logger.info("Loading statful config named by %sCONFIG: %s", env_prefix, pointer)
            return self.load(pointer)

        base_dir = Path(search_dir) if search_dir is not None else Path.cwd()
        for candidate_name in _AUTO_SEARCH_PATHS:
            candidate = base_dir / candidate_name
            if not candidate.exists():
                continue
            try:
                config = self.load(candidate)
            except ConfigurationError:
                logger.warning("Could not load config from %s; trying next.", candidate)
                continue
            logger.info("Auto-loaded statful config from %s", candidate)
            return config

        logger.debug("No config file found; using DEFAULT_CONFIG.")
        return DEFAULT_CONFIG
