"""Tests for balancer.errors — messages, attributes and hierarchy."""

from balancer.errors import (
    BalancerError,
    CapacityExceeded,
    DuplicateAddress,
    EmptyRegistry,
    InvalidEndpoint,
    NullEndpoint,
    UnknownPolicy,
)


def test_all_errors_share_base():
    for exc in (
        InvalidEndpoint(),
        NullEndpoint(),
        CapacityExceeded(10),
        DuplicateAddress("http://a"),
        EmptyRegistry(),
        UnknownPolicy("x"),
    ):
        assert isinstance(exc, BalancerError)


def test_builtin_bases():
    assert isinstance(NullEndpoint(), ValueError)
    assert isinstance(EmptyRegistry(), LookupError)
    assert isinstance(UnknownPolicy("x"), ValueError)
    assert not isinstance(CapacityExceeded(1), ValueError)


def test_capacity_exceeded():
    exc = CapacityExceeded(10)
    assert exc.capacity == 10
    assert "Maximum capacity" in str(exc)
    assert "10" in str(exc)


def test_duplicate_address():
    exc = DuplicateAddress("http://instance1")
    assert exc.address == "http://instance1"
    assert str(exc) == "Backend endpoint with address http://instance1 already exists."


def test_empty_registry_message():
    assert str(EmptyRegistry()) == "No backend endpoints available."


def test_unknown_policy_lists_known_names():
    exc = UnknownPolicy("weighted", ["round-robin", "random"])
    assert exc.name == "weighted"
    assert exc.known == ["random", "round-robin"]
    assert "'weighted'" in str(exc)
    assert "random, round-robin" in str(exc)
