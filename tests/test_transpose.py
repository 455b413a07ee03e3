"""Tests for the transpose() bridge between OptionalValue and Outcome."""

from hypothesis import given

from klaw_outcome import absent, failure, present, success
from tests.strategies import optional_outcomes, outcome_optionals


class TestOutcomeTranspose:
    """Tests for Outcome.transpose()."""

    def test_success_absent(self):
        assert success(absent()).transpose() == absent()

    def test_success_present(self):
        assert success(present(1)).transpose() == present(success(1))

    def test_failure(self):
        assert failure('e').transpose() == present(failure('e'))

    def test_failure_payload_is_not_inspected(self):
        """A failure transposes regardless of what its payload is."""
        assert failure(present(1)).transpose() == present(failure(present(1)))


class TestTransposeRoundTrip:
    """The two transposes are mutual inverses."""

    @given(optional_outcomes)
    def test_optional_round_trip(self, option):
        assert option.transpose().transpose() == option

    @given(outcome_optionals)
    def test_outcome_round_trip(self, result):
        assert result.transpose().transpose() == result

    def test_round_trip_examples(self):
        for option in (absent(), present(success(1)), present(failure('e'))):
            assert option.transpose().transpose() == option
        for result in (success(absent()), success(present(1)), failure('e')):
            assert result.transpose().transpose() == result
