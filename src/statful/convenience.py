"""Convenience API for statful-client — 3-line quickstart.

Example
-------
::

    from statful import StatfulClient
    client = StatfulClient()
    client.put("response_time", 42, unit="ms")

"""
from __future__ import annotations

from typing import Any


class StatfulClient:
    """Zero-config wrapper around ``MetricsSenderAPI`` for the common case.

    Wires a ``TransportMetricsSender`` to a transport (``ConsoleTransport``
    unless one is given) and applies ``configuration`` to every metric.

    Example
    -------
    ::

        from statful import StatfulClient, MemoryTransport
        transport = MemoryTransport()
        client = StatfulClient(transport=transport)
        client.put("requests", 1, route="/health")
    """

    def __init__(
        self,
        configuration: Any = None,
        transport: Any = None,
    ) -> None:
        from statful.config.defaults import DEFAULT_CONFIG
        from statful.sender.base import TransportMetricsSender
        from statful.sender.transport import ConsoleTransport

        self.configuration = configuration if configuration is not None else DEFAULT_CONFIG
        self.transport = transport if transport is not None else ConsoleTransport()
        self.sender: TransportMetricsSender = TransportMetricsSender(
            self.transport, dry_run=self.configuration.dry_run
        )

    def api(self) -> Any:
        """Return a fresh ``MetricsSenderAPI`` with the configuration applied."""
        from statful.api.sender_api import MetricsSenderAPI

        return MetricsSenderAPI(self.sender).configuration(self.configuration)

    def put(self, name: str, value: Any, /, **tags: str) -> None:
        """Send *name* = *value* with optional keyword tags.

        *name* and *value* are positional-only, so ``name`` and ``value``
        are usable as tag keys.
        """
        api = self.api().metric_name(name).value(value)
        for key, tag_value in tags.items():
            api.tag(key, tag_value)
        api.send()

    def __repr__(self) -> str:
        return (
            f"StatfulClient(namespace={self.configuration.namespace!r}, "
            f"transport={type(self.transport).__name__})"
        )
