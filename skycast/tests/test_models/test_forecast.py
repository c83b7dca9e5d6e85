"""Tests for forecast view-model types."""

import dataclasses

import pytest

from skycast.models.forecast import (
    Failed,
    FailureReason,
    Idle,
    Pending,
    Ready,
    ResultStatus,
)


class TestResultVariants:
    def test_status_tags(self, make_days):
        days = make_days(1)
        assert Idle().status == ResultStatus.IDLE
        assert Pending("x").status == ResultStatus.PENDING
        assert Ready("x", days[0], days).status == ResultStatus.READY
        assert Failed(FailureReason.EMPTY).status == ResultStatus.FAILED

    def test_status_not_a_field(self):
        assert [f.name for f in dataclasses.fields(Failed)] == ["reason"]

    def test_frozen(self, make_days):
        days = make_days(2)
        ready = Ready("x", days[0], days)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ready.selected_day = days[1]

    def test_day_is_frozen(self, make_days):
        day = make_days(1)[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            day.temp_max = 99.0
