"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pystatdist.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(warnings=()):
    return Result(
        params=FakeParams(0.05),
        info={'family': 't'},
        timing=None,
        backend_name='cpu_reference',
        warnings=warnings,
    )


class TestResultConstruction:

    def test_basic_creation(self):
        r = _make()
        assert r.params.value == 0.05
        assert r.info == {'family': 't'}
        assert r.timing is None
        assert r.backend_name == 'cpu_reference'

    def test_warnings_default_empty(self):
        r = Result(params=FakeParams(1.0), info={}, timing=None,
                   backend_name='cpu_reference')
        assert r.warnings == ()


class TestImmutability:

    def test_cannot_set_params(self):
        r = _make()
        with pytest.raises(FrozenInstanceError):
            r.params = FakeParams(2.0)

    def test_cannot_set_warnings(self):
        r = _make()
        with pytest.raises(FrozenInstanceError):
            r.warnings = ("x",)


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert not _make().has_warning("capped")

    def test_substring_match(self):
        r = _make(("two-tailed p-value was capped at 1",))
        assert r.has_warning("capped")

    def test_no_match(self):
        r = _make(("iteration cap reached",))
        assert not r.has_warning("negative")
