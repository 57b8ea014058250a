"""statful-client — Statful line-protocol encoder and metrics sender API.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Quick-start
-----------
>>> import statful
>>> statful.__version__
'0.1.0'

>>> from statful import MessageBuilder, Tags
>>> (MessageBuilder.new_builder()
...     .with_name("response_time")
...     .with_value("3")
...     .with_tags(Tags.from_pair("unit", "s"))
...     .with_timestamp(121232323)
...     .build())
'response_time,unit=s 3 121232323'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from statful.convenience import StatfulClient

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------
from statful.schema.config import ClientConfiguration
from statful.schema.errors import (
    ConfigurationError,
    ErrorSeverity,
    MessageBuildError,
    StatfulError,
    TransportError,
)

# ---------------------------------------------------------------------------
# Domain
# ---------------------------------------------------------------------------
from statful.domain.aggregations import Aggregation, AggregationFrequency, Aggregations
from statful.domain.tags import Tags

# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------
from statful.message.builder import MessageBuilder, escape_identifier, escape_tag

# ---------------------------------------------------------------------------
# Sender
# ---------------------------------------------------------------------------
from statful.sender.base import MetricsSender, TransportMetricsSender
from statful.sender.transport import (
    ConsoleTransport,
    FileTransport,
    MemoryTransport,
    NullTransport,
    Transport,
)

# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------
from statful.api.sender_api import MetricsSenderAPI

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------
from statful.config.defaults import DEFAULT_CONFIG
from statful.config.loader import ConfigLoader
from statful.config.schema import validate_config

__all__ = [
    "__version__",
    "StatfulClient",
    # schema — errors
    "ErrorSeverity",
    "StatfulError",
    "ConfigurationError",
    "MessageBuildError",
    "TransportError",
    # schema — config
    "ClientConfiguration",
    # domain
    "Tags",
    "Aggregation",
    "AggregationFrequency",
    "Aggregations",
    # message
    "MessageBuilder",
    "escape_identifier",
    "escape_tag",
    # sender
    "MetricsSender",
    "TransportMetricsSender",
    "Transport",
    "ConsoleTransport",
    "FileTransport",
    "MemoryTransport",
    "NullTransport",
    # api
    "MetricsSenderAPI",
    # config
    "DEFAULT_CONFIG",
    "ConfigLoader",
    "validate_config",
]
