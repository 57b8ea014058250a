"""Test that the 3-line quickstart API works for statful-client."""
from __future__ import annotations


def test_quickstart_import() -> None:
    from statful import StatfulClient

    client = StatfulClient()
    assert client is not None


def test_quickstart_put_sends_line() -> None:
    from statful import MemoryTransport, StatfulClient

    transport = MemoryTransport()
    client = StatfulClient(transport=transport)
    client.put("response_time", 42, unit="ms")

    assert len(transport.lines) == 1
    head, value, timestamp, sample_rate = transport.lines[0].split(" ")
    assert head == "application.response_time,unit=ms"
    assert value == "42"
    assert timestamp.isdigit()
    assert sample_rate == "100"


def test_quickstart_uses_configuration() -> None:
    from statful import ClientConfiguration, MemoryTransport, StatfulClient

    transport = MemoryTransport()
    client = StatfulClient(
        ClientConfiguration(namespace="checkout", aggregations=["avg"], aggregation_frequency=10),
        transport=transport,
    )
    client.api().metric_name("latency").value("7").timestamp(100).send()

    assert transport.lines == ["checkout.latency 7 100 avg,10 100"]


def test_quickstart_dry_run_sends_nothing() -> None:
    from statful import ClientConfiguration, MemoryTransport, StatfulClient

    transport = MemoryTransport()
    client = StatfulClient(ClientConfiguration(dry_run=True), transport=transport)
    client.put("hits", 1)

    assert transport.lines == []
    assert client.sender.sent_count == 1


def test_quickstart_default_transport_is_console() -> None:
    from statful import ConsoleTransport, StatfulClient

    assert isinstance(StatfulClient().transport, ConsoleTransport)


def test_quickstart_repr() -> None:
    from statful import StatfulClient

    assert "StatfulClient" in repr(StatfulClient())


def test_quickstart_put_accepts_name_and_value_tags() -> None:
    from statful import MemoryTransport, StatfulClient

    transport = MemoryTransport()
    client = StatfulClient(transport=transport)
    client.put("m", 1, name="svc", value="v")

    assert len(transport.lines) == 1
    head = transport.lines[0].split(" ")[0]
    assert head.startswith("application.m,")
    assert ",name=svc" in head
    assert ",value=v" in head
