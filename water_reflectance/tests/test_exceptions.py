"""
Tests for errors and diagnostics.
"""

import pytest

from water_reflectance.exceptions import (
    AssumptionOverrideWarning,
    Diagnostic,
    DiagnosticLog,
    DomainExtrapolationWarning,
    ReflectanceWarning,
)


class TestDiagnosticLog:

    def test_records_and_warns(self):
        log = DiagnosticLog()
        with pytest.warns(DomainExtrapolationWarning, match="beyond"):
            log.extrapolation("Albedo beyond model domain")
        assert len(log) == 1
        assert log.as_tuple() == (
            Diagnostic(DomainExtrapolationWarning, "Albedo beyond model domain"),
        )

    def test_override(self):
        log = DiagnosticLog()
        with pytest.warns(AssumptionOverrideWarning):
            diagnostic = log.override("Wind speed unused")
        assert not diagnostic.is_extrapolation

    def test_order_preserved(self):
        log = DiagnosticLog()
        with pytest.warns(ReflectanceWarning):
            log.override("first")
            log.extrapolation("second")
        assert [d.message for d in log.as_tuple()] == ["first", "second"]

    def test_empty(self):
        assert DiagnosticLog().as_tuple() == ()


class TestHierarchy:

    def test_warnings_are_user_warnings(self):
        assert issubclass(DomainExtrapolationWarning, UserWarning)
        assert issubclass(AssumptionOverrideWarning, ReflectanceWarning)
