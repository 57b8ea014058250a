"""Message package for statful-client.

Provides the line-protocol encoder and its escaping helpers.
"""
from __future__ import annotations

from statful.message.builder import MessageBuilder, escape_identifier, escape_tag

__all__ = [
    "MessageBuilder",
    "escape_identifier",
    "escape_tag",
]
