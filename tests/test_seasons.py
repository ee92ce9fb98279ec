"""Unit tests for seasonal periods and the rolling month window."""
import pytest
from outorga.domain.enums import Period
from outorga.domain.seasons import month_in_period, month_label, month_window


@pytest.mark.parametrize("month", [10, 11, 12, 1, 2, 3])
def test_wet_months(month):
    assert month_in_period(month, Period.WET)
    assert not month_in_period(month, Period.DRY)


@pytest.mark.parametrize("month", [4, 5, 6, 7, 8, 9])
def test_dry_months(month):
    assert month_in_period(month, Period.DRY)
    assert not month_in_period(month, Period.WET)


def test_month_in_period_accepts_plain_strings():
    assert month_in_period(1, "wet")
    assert not month_in_period(1, "dry")


def test_window_from_august_wraps_into_next_year():
    window = month_window(8, 2023)
    assert len(window) == 12
    assert window[0] == (8, 2023)
    assert window[4] == (12, 2023)
    assert window[5] == (1, 2024)
    assert window[-1] == (7, 2024)


def test_window_from_january_stays_in_one_year():
    assert month_window(1, 2024) == [(m, 2024) for m in range(1, 13)]


def test_window_from_december():
    window = month_window(12, 2022)
    assert window[0] == (12, 2022)
    assert window[1] == (1, 2023)
    assert window[-1] == (11, 2023)


def test_window_rejects_invalid_anchor():
    with pytest.raises(ValueError):
        month_window(13, 2024)


def test_month_label():
    assert month_label(8, 2023) == "Aug-2023"
    assert month_label(1, 2024) == "Jan-2024"
