"""Client configuration schema for statful-client.

``ClientConfiguration`` is a Pydantic v2 model that acts as the validated
boundary object between raw configuration sources (YAML files, environment
variables, in-memory dicts) and the sender API.

Shipped in this module
----------------------
- ClientConfiguration — Pydantic v2 model with class-method loaders
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from statful.domain.aggregations import Aggregation, AggregationFrequency


class ClientConfiguration(BaseModel):
    """Validated defaults applied to every metric sent through the API.

    Parameters
    ----------
    namespace:
        Prefix for every metric name; defaults to ``"application"``.
    sample_rate:
        Percentage (1-100) of observations actually dispatched.
    tags:
        Global tags merged into every metric.
    aggregations:
        Global aggregations merged into every metric.
    aggregation_frequency:
        Default aggregation window, in seconds.  ``None`` leaves it unset.
    dry_run:
        When ``True`` encoded lines are logged instead of sent.
    """

    model_config = {"validate_assignment": True}

    namespace: str = Field(default="application")
    sample_rate: int = Field(default=100, ge=1, le=100)
    tags: dict[str, str] = Field(default_factory=dict)
    aggregations: list[Aggregation] = Field(default_factory=list)
    aggregation_frequency: AggregationFrequency | None = Field(default=None)
    dry_run: bool = Field(default=False)

    @model_validator(mode="before")
    @classmethod
    def _normalise_collections(cls, values: Any) -> Any:  # noqa: ANN401
        """Ensure ``tags`` and ``aggregations`` are never None.

        Scalar tag keys and values (``version: 2`` in YAML) become strings,
        matching what ``from_env`` produces.
        """
        if isinstance(values, dict):
            tags = values.get("tags")
            if tags is None:
                values["tags"] = {}
            elif isinstance(tags, dict):
                values["tags"] = {
                    str(k): str(v) if isinstance(v, (str, int, float)) else v
                    for k, v in tags.items()
                }
            if values.get("aggregations") is None:
                values["aggregations"] = []
        return values

    @field_validator("aggregations")
    @classmethod
    def _dedupe_aggregations(cls, value: list[Aggregation]) -> list[Aggregation]:
        return list(dict.fromkeys(value))

    # ------------------------------------------------------------------
    # Class-method loaders
    # ------------------------------------------------------------------

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientConfiguration":
        """Load and validate configuration from a YAML file.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        pydantic.ValidationError
            If the parsed data fails validation.
        """
        resolved = Path(path)
        if not resolved.exists():
            raise FileNotFoundError(f"Config file not found: {resolved}")
        with resolved.open(encoding="utf-8") as fh:
            raw: object = yaml.safe_load(fh)
        data: dict[str, object] = dict(raw) if isinstance(raw, dict) else {}
        return cls.model_validate(data)

    @classmethod
    def from_env(cls, prefix: str = "STATFUL_") -> "ClientConfiguration":
        """Build configuration from environment variables.

        ``STATFUL_NAMESPACE=checkout`` maps to ``namespace="checkout"``.
        ``STATFUL_AGGREGATIONS`` takes a comma-separated list,
        ``STATFUL_TAGS`` a comma-separated list of ``key=value`` pairs (or a
        JSON object), and ``STATFUL_DRY_RUN`` accepts ``"true"`` / ``"1"`` /
        ``"yes"`` as truthy.
        """
        data: dict[str, object] = {}

        for raw_key, raw_value in os.environ.items():
            if not raw_key.startswith(prefix):
                continue
            key = raw_key[len(prefix):].lower()
            if key == "dry_run":
                data[key] = raw_value.lower() in {"true", "1", "yes"}
            elif key == "aggregations":
                data[key] = [item.strip() for item in raw_value.split(",") if item.strip()]
            elif key == "tags":
                data[key] = _parse_env_tags(raw_value)
            elif key == "aggregation_frequency":
                stripped = raw_value.strip()
                data[key] = int(stripped) if stripped.isdigit() else None
            else:
                data[key] = raw_value

        return cls.model_validate(data)

    def merge(self, overrides: "ClientConfiguration") -> "ClientConfiguration":
        """Produce a new configuration with non-default values from *overrides*.

        ``tags`` are merged with override values winning; ``aggregations``
        are unioned preserving order.  Neither input is mutated.
        """
        default_data = ClientConfiguration().model_dump()
        merged = self.model_dump()

        for key, override_value in overrides.model_dump().items():
            if override_value == default_data.get(key):
                continue
            if key == "tags":
                merged["tags"] = {**merged["tags"], **override_value}
            elif key == "aggregations":
                merged["aggregations"] = list(
                    dict.fromkeys([*merged["aggregations"], *override_value])
                )
            else:
                merged[key] = override_value

        return ClientConfiguration.model_validate(merged)


def _parse_env_tags(raw_value: str) -> dict[str, str]:
    stripped = raw_value.strip()
    if stripped.startswith("{"):
        try:
            parsed = json.loads(stripped)
        except json.JSONDecodeError:
            return {}
        return {str(k): str(v) for k, v in parsed.items()} if isinstance(parsed, dict) else {}

    tags: dict[str, str] = {}
    for pair in stripped.split(","):
        if "=" not in pair:
            continue
        key, value = pair.split("=", 1)
        if key.strip():
            tags[key.strip()] = value.strip()
    return tags
