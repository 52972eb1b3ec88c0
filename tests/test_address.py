"""Tests for balancer.address — endpoint address parsing."""

import pytest

from balancer.address import ParsedAddress, parse_address, scheme


def test_scheme_extraction():
    assert scheme("http://instance1") == "http"
    assert scheme("HTTPS://example.com") == "https"
    assert scheme("unix:///tmp/x.sock") == "unix"
    assert scheme("instance1:8080") == ""


def test_parse_http_default_port():
    parsed = parse_address("http://instance1")
    assert parsed == ParsedAddress(raw="http://instance1", scheme="http", host="instance1", port=80)


def test_parse_explicit_port_and_path():
    parsed = parse_address("https://api.example.com:8443/v1/items")
    assert parsed.scheme == "https"
    assert parsed.host == "api.example.com"
    assert parsed.port == 8443
    assert parsed.path == "/v1/items"


def test_parse_bare_host_port():
    parsed = parse_address("10.0.0.5:9000")
    assert parsed.scheme == ""
    assert parsed.host == "10.0.0.5"
    assert parsed.port == 9000


def test_parse_unknown_scheme_has_no_default_port():
    parsed = parse_address("redis://cache")
    assert parsed.host == "cache"
    assert parsed.port is None


def test_parse_ipv6_host():
    parsed = parse_address("tcp://[::1]:7000")
    assert parsed.host == "::1"
    assert parsed.port == 7000


def test_parse_unix_path():
    parsed = parse_address("unix:///run/backend.sock")
    assert parsed.scheme == "unix"
    assert parsed.path == "/run/backend.sock"
    assert parsed.host is None


@pytest.mark.parametrize(
    "address",
    ["", "unix://", "http://host:notaport", "http://host:70000", "http://:8080"],
)
def test_parse_invalid(address):
    with pytest.raises(ValueError):
        parse_address(address)


def test_parse_scheme_without_default_port():
    assert parse_address("tcp://backend").port is None
    assert parse_address("grpc://backend").port is None
