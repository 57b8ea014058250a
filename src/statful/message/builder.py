"""Statful line-protocol message builder.

Renders one metric observation as a single line::

    [namespace.]name[,tag=val,...] value [timestamp] [agg,agg,...[,freq]] [sampleRate]

Tokens are separated by one space and absent optional tokens are omitted
entirely.  Spaces and commas inside the namespace and the name are prefixed
with a backslash; tag keys and values additionally escape the equals sign.
The metric value is written verbatim.

Shipped in this module
----------------------
- escape_identifier — backslash-escape spaces and commas in namespace and name
- escape_tag      — backslash-escape spaces, commas and equals signs in tags
- MessageBuilder  — fluent accumulator with a terminal ``build()``
"""
from __future__ import annotations

import re

from statful.domain.aggregations import AggregationFrequency, Aggregations
from statful.domain.tags import Tags
from statful.schema.errors import MessageBuildError

_IDENTIFIER_DELIMITERS_RE = re.compile(r"([ ,])")
_TAG_DELIMITERS_RE = re.compile(r"([ ,=])")
_LINE_BREAK_RE = re.compile(r"[\r\n]")


def escape_identifier(text: str) -> str:
    """Prefix every space and comma in a namespace or metric name with a backslash.

    An equals sign cannot end the identifier, so it is left alone.

    Examples
    --------
    >>> print(escape_identifier("a name, with =equal"))
    a\\ name\\,\\ with\\ =equal
    """
    return _IDENTIFIER_DELIMITERS_RE.sub(r"\\\1", text)


def escape_tag(text: str) -> str:
    """Prefix every space, comma and equals sign in a tag key or value with a backslash.

    Examples
    --------
    >>> print(escape_tag("tag, key="))
    tag\\,\\ key\\=
    """
    return _TAG_DELIMITERS_RE.sub(r"\\\1", text)


class MessageBuilder:
    """Accumulates the fields of one metric and renders them with ``build()``.

    Every ``with_*`` setter ignores ``None`` (and empty strings for text
    fields), leaving any previously set value in place, so calls can be
    chained without checking each argument first.

    Examples
    --------
    >>> (MessageBuilder.new_builder()
    ...     .with_namespace("web")
    ...     .with_name("requests")
    ...     .with_value("1")
    ...     .with_timestamp(1700000000)
    ...     .build())
    'web.requests 1 1700000000'
    """

    def __init__(self) -> None:
        self._namespace: str | None = None
        self._name: str | None = None
        self._value: str | None = None
        self._tags: Tags | None = None
        self._aggregations: Aggregations | None = None
        self._aggregation_freq: AggregationFrequency | None = None
        self._timestamp: int | None = None
        self._sample_rate: int | None = None

    @classmethod
    def new_builder(cls) -> "MessageBuilder":
        """Return a fresh, empty builder."""
        return cls()

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def with_namespace(self, namespace: str | None) -> "MessageBuilder":
        if namespace:
            self._namespace = namespace
        return self

    def with_name(self, name: str | None) -> "MessageBuilder":
        if name:
            self._name = name
        return self

    def with_value(self, value: str | int | float | None) -> "MessageBuilder":
        if value is not None and value != "":
            self._value = str(value)
        return self

    def with_tags(self, tags: Tags | None) -> "MessageBuilder":
        if tags is not None:
            self._tags = tags
        return self

    def with_aggregations(self, aggregations: Aggregations | None) -> "MessageBuilder":
        if aggregations is not None:
            self._aggregations = aggregations
        return self

    def with_aggregation_freq(
        self, aggregation_freq: AggregationFrequency | None
    ) -> "MessageBuilder":
        if aggregation_freq is not None:
            self._aggregation_freq = AggregationFrequency(aggregation_freq)
        return self

    def with_timestamp(self, timestamp: int | None) -> "MessageBuilder":
        if timestamp is not None:
            self._timestamp = int(timestamp)
        return self

    def with_sample_rate(self, sample_rate: int | None) -> "MessageBuilder":
        if sample_rate is not None:
            self._sample_rate = int(sample_rate)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def build(self) -> str:
        """Render the accumulated fields as one protocol line.

        Returns
        -------
        str
            The encoded line, without a trailing newline.

        Raises
        ------
        MessageBuildError
            If the metric name or value has not been set, or if any
            field contains a line break.
        """
        if not self._name:
            raise MessageBuildError(
                "Cannot build a metric message without a name",
                context={"namespace": self._namespace},
            )
        if not self._value:
            raise MessageBuildError(
                "Cannot build a metric message without a value",
                context={"name": self._name, "namespace": self._namespace},
            )
        self._reject_line_breaks()

        tokens = [self._identifier() + self._tag_clause(), self._value]

        if self._timestamp is not None:
            tokens.append(str(self._timestamp))

        aggregation_clause = self._aggregation_clause()
        if aggregation_clause:
            tokens.append(aggregation_clause)

        if self._sample_rate is not None:
            tokens.append(str(self._sample_rate))

        return " ".join(tokens)

    def _reject_line_breaks(self) -> None:
        fields = [("namespace", self._namespace), ("name", self._name), ("value", self._value)]
        for key, value in self._tags or ():
            fields.append(("tag", key))
            fields.append(("tag", value))
        for field, text in fields:
            if text and _LINE_BREAK_RE.search(text):
                raise MessageBuildError(
                    f"Metric {field} must not contain a line break: {text!r}",
                    context={"field": field, "name": self._name},
                )

    def _identifier(self) -> str:
        name = escape_identifier(self._name or "")
        if self._namespace:
            return f"{escape_identifier(self._namespace)}.{name}"
        return name

    def _tag_clause(self) -> str:
        if not self._tags:
            return ""
        pairs = (f"{escape_tag(key)}={escape_tag(value)}" for key, value in self._tags)
        return "," + ",".join(pairs)

    def _aggregation_clause(self) -> str:
        parts = [aggregation.value for aggregation in self._aggregations or ()]
        if self._aggregation_freq is not None:
            parts.append(str(int(self._aggregation_freq)))
        return ",".join(parts)

    def __repr__(self) -> str:
        return (
            f"MessageBuilder(namespace={self._namespace!r}, "
            f"name={self._name!r}, value={self._value!r})"
        )
