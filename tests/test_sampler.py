from __future__ import annotations

import math

from current_router.core.grid import LatLng
from current_router.data.currents import CurrentSample
from current_router.routing.sampler import CurrentField, as_field


def test_empty_field_has_no_current() -> None:
    field = CurrentField([])
    assert len(field) == 0
    assert field.nearest(LatLng(0, 0)) is None


def test_nearest_sample_wins() -> None:
    near = CurrentSample(0.1, 0.1, 1.0, 0.0)
    far = CurrentSample(5.0, 5.0, 0.0, 1.0)
    field = CurrentField([far, near])
    assert field.nearest(LatLng(0, 0)) is near
    assert field.nearest(LatLng(4.0, 4.5)) is far


def test_ties_go_to_first_sample() -> None:
    first = CurrentSample(0.0, 1.0, 1.0, 0.0)
    second = CurrentSample(0.0, -1.0, -1.0, 0.0)
    assert CurrentField([first, second]).nearest(LatLng(0, 0)) is first
    assert CurrentField([second, first]).nearest(LatLng(0, 0)) is second


def test_nan_coordinates_never_match() -> None:
    broken = CurrentSample(math.nan, math.nan, 1.0, 1.0)
    good = CurrentSample(5.0, 5.0, 0.0, 1.0)
    field = CurrentField([broken, good])
    assert field.nearest(LatLng(0, 0)) is good
    assert field.nearest(LatLng(math.nan, 0.0)) is None


def test_as_field_reuses_existing_field() -> None:
    field = CurrentField([CurrentSample(0, 0, 1, 0)])
    assert as_field(field) is field
    assert len(as_field([CurrentSample(0, 0, 1, 0)])) == 1
