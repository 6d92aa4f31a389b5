"""Tests for fragroute.errors — exception hierarchy."""

from fragroute.errors import ConfigurationError, FragrouteError, PatternMismatch


class TestHierarchy:
    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, FragrouteError)

    def test_pattern_mismatch(self) -> None:
        assert issubclass(PatternMismatch, FragrouteError)
        assert issubclass(PatternMismatch, ValueError)


class TestPatternMismatch:
    def test_attributes(self) -> None:
        err = PatternMismatch("user/:id", "post/1")
        assert err.template == "user/:id"
        assert err.fragment == "post/1"

    def test_message(self) -> None:
        err = PatternMismatch("user/:id", "post/1")
        assert str(err) == "Fragment 'post/1' does not match route 'user/:id'"
