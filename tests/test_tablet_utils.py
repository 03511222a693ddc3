import pytest

from utils import calculate_expected_tablet_count


@pytest.mark.parametrize("received, tablet, expected", [
    (50, 0.8, 62),
    (100, 1, 100),
    (10, 0.25, 40),
    (99.9, 1, 99),
    (0, 0.8, 0),
])
def test_count_is_floor_of_received_over_tablet(received, tablet, expected):
    assert calculate_expected_tablet_count(received, tablet) == expected


@pytest.mark.parametrize("received, tablet", [
    (None, 0.8),
    (50, None),
    (None, None),
    (50, 0),
    (50, 0.0),
])
def test_count_is_none_without_usable_weights(received, tablet):
    assert calculate_expected_tablet_count(received, tablet) is None


@pytest.mark.parametrize("received, tablet", [
    (1e300, 1e-300),
    (1e20, 1),
    (float("inf"), 1),
    (float("nan"), 0.8),
])
def test_count_is_none_when_quotient_does_not_fit(received, tablet):
    assert calculate_expected_tablet_count(received, tablet) is None
