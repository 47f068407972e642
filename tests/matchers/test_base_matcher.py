"""Unit tests for MatchResult and assert_that."""

import pytest

from matchers import MatchResult, assert_that, close_to, failure, success


class TestMatchResult:
    def test_success(self):
        result = success()
        assert result
        assert result.score == 1.0
        assert result.description is None

    def test_failure(self):
        result = failure("was 2.0")
        assert not result
        assert result.score == 0.0
        assert result.description == "was 2.0"

    def test_immutable(self):
        with pytest.raises(AttributeError):
            success().matched = False

    def test_equality(self):
        assert success() == MatchResult(True)
        assert failure("x") != failure("y")


class TestAssertThat:
    def test_passes_silently(self):
        assert assert_that(1.0, close_to(1.0, 1e-5)) is None

    def test_reason_first_line(self):
        with pytest.raises(AssertionError) as exc:
            assert_that(2.0, close_to(1.0, 1e-5), "price drifted")
        assert str(exc.value).splitlines()[0] == "price drifted"

    def test_matcher_is_callable(self):
        assert close_to(1.0, 1e-5)(1.0)
