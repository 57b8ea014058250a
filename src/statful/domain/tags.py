"""Tag set attached to a Statful metric.

A ``Tags`` instance is an unordered mapping of tag key to tag value.  It does
not validate or escape its contents: escaping happens when a message is
rendered by :class:`~statful.message.builder.MessageBuilder`.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence


class Tags:
    """Mutable key/value tag set.

    Examples
    --------
    >>> tags = Tags.from_pair("unit", "ms")
    >>> tags.put_tag("app", "checkout").get_value("app")
    'checkout'
    >>> len(tags)
    2
    """

    def __init__(self) -> None:
        self._tags: dict[str, str] = {}

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_pair(cls, key: str, value: str) -> "Tags":
        """Return a tag set holding the single *key*/*value* entry."""
        result = cls()
        result.put_tag(key, value)
        return result

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "Tags":
        """Build a tag set from alternating key, value tokens.

        Parameters
        ----------
        tokens:
            ``[key1, value1, key2, value2, ...]``.

        Raises
        ------
        ValueError
            If *tokens* has an odd length, i.e. a key without a value.
        """
        if len(tokens) % 2:
            raise ValueError(
                f"Tag tokens must come in key/value pairs; got {len(tokens)} tokens"
            )
        result = cls()
        for index in range(0, len(tokens), 2):
            result.put_tag(tokens[index], tokens[index + 1])
        return result

    @classmethod
    def from_tags(cls, tags: "Tags | None") -> "Tags":
        """Return an independent copy of *tags* (empty when ``None``)."""
        return cls().merge(tags)

    @staticmethod
    def is_empty_or_none(*values: str | None) -> bool:
        """Return ``True`` if any of *values* is ``None`` or an empty string."""
        return any(not value for value in values)

    # ------------------------------------------------------------------
    # Mutation / lookup
    # ------------------------------------------------------------------

    def put_tag(self, key: str, value: str) -> "Tags":
        """Insert or overwrite the tag *key*."""
        self._tags[key] = value
        return self

    def merge(self, other: "Tags | None") -> "Tags":
        """Copy every entry of *other* into this set, overwriting collisions.

        ``None`` is accepted and ignored.  Returns ``self`` for chaining.
        """
        if other is not None:
            self._tags.update(other.tags)
        return self

    def get_value(self, key: str) -> str | None:
        """Return the value stored for *key*, or ``None``."""
        return self._tags.get(key)

    @property
    def tags(self) -> dict[str, str]:
        """The underlying key/value mapping."""
        return self._tags

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, key: object) -> bool:
        return key in self._tags

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._tags.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tags):
            return NotImplemented
        return self._tags == other._tags

    def __repr__(self) -> str:
        return f"Tags({self._tags!r})"
