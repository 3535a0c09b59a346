from __future__ import annotations

import pytest

from src.domain.state import (
    BrowserState,
    CloseVehicle,
    GoToPage,
    NextPage,
    PageLoaded,
    PreviousPage,
    SelectRoutes,
    SelectTrips,
    SelectVehicle,
    SetLimit,
    needs_trip_resolution,
    needs_vehicle_fetch,
    reduce,
)


@pytest.mark.parametrize(
    "prior",
    [
        BrowserState(),
        BrowserState(selected_routes=("Red",), selected_trips=("T1", "T2"), page=4),
        BrowserState(selected_routes=("15", "22"), page=2, total_pages=7, has_more=True),
    ],
)
def test_select_routes_resets_page_and_clears_trips(prior: BrowserState) -> None:
    after = reduce(prior, SelectRoutes(route_ids=("15",)))

    assert after.selected_routes == ("15",)
    assert after.selected_trips == ()
    assert after.page == 1
    assert after.total_pages is None


def test_select_routes_drops_blanks_and_duplicates_keeping_order() -> None:
    after = reduce(BrowserState(), SelectRoutes(route_ids=("22", "", "15", "22")))
    assert after.selected_routes == ("22", "15")


def test_select_trips_resets_page() -> None:
    before = BrowserState(selected_routes=("Red",), page=3)
    after = reduce(before, SelectTrips(trip_ids=("T9",)))

    assert after.selected_trips == ("T9",)
    assert after.page == 1
    assert after.selected_routes == ("Red",)


def test_select_trips_without_routes_is_ignored() -> None:
    after = reduce(BrowserState(page=2), SelectTrips(trip_ids=("T9",)))
    assert after.selected_trips == ()
    assert after.page == 1


def test_go_to_page_bounded_by_known_total() -> None:
    state = BrowserState(total_pages=3)
    assert reduce(state, GoToPage(page=2)).page == 2
    assert reduce(state, GoToPage(page=9)).page == 3
    assert reduce(state, GoToPage(page=0)).page == 1


def test_next_page_stops_on_last_page() -> None:
    state = BrowserState(page=2, has_more=False)
    assert reduce(state, NextPage()) is state

    state = BrowserState(page=2, has_more=True)
    assert reduce(state, NextPage()).page == 3


def test_previous_page_stops_at_one() -> None:
    assert reduce(BrowserState(page=1), PreviousPage()).page == 1
    assert reduce(BrowserState(page=5), PreviousPage()).page == 4


def test_set_limit_resets_page() -> None:
    after = reduce(BrowserState(page=4), SetLimit(limit=25))
    assert after.limit == 25
    assert after.page == 1

    with pytest.raises(ValueError):
        reduce(BrowserState(), SetLimit(limit=0))


def test_vehicle_selection_does_not_touch_filters() -> None:
    before = BrowserState(selected_routes=("Red",), page=2)
    opened = reduce(before, SelectVehicle(vehicle_id="y1234"))

    assert opened.selected_vehicle_id == "y1234"
    assert not needs_vehicle_fetch(before, opened)
    assert reduce(opened, CloseVehicle()).selected_vehicle_id is None


def test_page_loaded_records_page_set_info() -> None:
    after = reduce(BrowserState(), PageLoaded(total_pages=3, has_more=True))
    assert after.total_pages == 3
    assert after.has_more is True


def test_change_detection() -> None:
    base = BrowserState(selected_routes=("Red",))
    paged = reduce(base, GoToPage(page=2))
    rerouted = reduce(base, SelectRoutes(route_ids=("Blue",)))

    assert needs_vehicle_fetch(base, paged)
    assert not needs_trip_resolution(base, paged)
    assert needs_trip_resolution(base, rerouted)


def test_unknown_action_rejected() -> None:
    with pytest.raises(TypeError):
        reduce(BrowserState(), object())  # type: ignore[arg-type]
