from __future__ import annotations

import pytest

from app.models.listing import FilterCriteria
from app.services.listing_state import ListingState


def test_defaults():
    state = ListingState()
    assert state.page == 1
    assert state.page_size == 6
    assert state.criteria == FilterCriteria()


def test_changing_criteria_resets_page():
    state = ListingState()
    state.go_to_page(3)
    state.update_criteria(FilterCriteria(search_text="a"))
    assert state.page == 1


def test_same_criteria_keeps_page():
    state = ListingState()
    state.update_criteria(FilterCriteria(ratings={5}))
    state.go_to_page(2)
    state.update_criteria(FilterCriteria(ratings={5}))
    assert state.page == 2


def test_changing_page_size_resets_page():
    state = ListingState()
    state.go_to_page(4)
    state.set_page_size(12)
    assert state.page == 1
    assert state.page_size == 12


def test_invalid_page_size_rejected():
    with pytest.raises(ValueError):
        ListingState(page_size=0)
    with pytest.raises(ValueError):
        ListingState().set_page_size(0)


def test_apply_last_page_of_twenty(synthesized_employees):
    state = ListingState(page_size=6)
    state.go_to_page(4)
    page = state.apply(synthesized_employees)

    assert page.total_pages == 4
    assert page.total_items == 20
    assert page.total_unfiltered == 20
    assert len(page.items) == 2
    assert page.start_index == 18
    assert page.end_index == 20
    assert page.visible_pages == [1, 2, 3, 4]


def test_apply_clamps_page_past_the_end(synthesized_employees):
    state = ListingState(page_size=6)
    state.go_to_page(10)
    page = state.apply(synthesized_employees)

    assert page.page == 4
    assert len(page.items) == 2


def test_apply_with_no_matches(synthesized_employees):
    state = ListingState()
    state.update_criteria(FilterCriteria(search_text="zzzz-no-match"))
    page = state.apply(synthesized_employees)

    assert page.items == []
    assert page.total_pages == 0
    assert page.page == 1
    assert page.total_unfiltered == 20
