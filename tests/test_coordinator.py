from conftest import API_URL

from property_catalog.coordinator import (
    DETAILS,
    ERROR,
    FORM,
    LOADING,
    READY,
    CatalogCoordinator,
)
from property_catalog.models import NewProperty
from property_catalog.store import PropertyStore


def _candidate(**overrides):
    data = dict(
        name="Lakeside Lot",
        type="Plot",
        location="Waco",
        price=75000,
        description="Half acre by the lake",
    )
    data.update(overrides)
    return NewProperty(**data)


def test_view_state_follows_store(store, backend):
    coordinator = CatalogCoordinator(store)
    assert coordinator.view_state() == LOADING
    store.start()
    assert coordinator.view_state() == READY
    backend.fail_get = True
    store.refetch()
    assert coordinator.view_state() == ERROR
    assert "backend.test/properties" in coordinator.error_hint()


def test_visible_properties_and_types(store):
    store.start()
    coordinator = CatalogCoordinator(store)
    coordinator.search_term = "oak"
    assert [p.name for p in coordinator.visible_properties()] == ["Oak Villa"]
    coordinator.search_term = ""
    coordinator.selected_type = "Plot"
    assert [p.name for p in coordinator.visible_properties()] == ["Pine Plot"]
    assert coordinator.available_types() == ["House", "Plot"]


def test_summary_text(store):
    store.start()
    coordinator = CatalogCoordinator(store)
    assert coordinator.summary_text() == "Showing 2 of 2 properties"
    coordinator.search_term = "pine"
    coordinator.selected_type = "Plot"
    assert coordinator.summary_text() == 'Showing 1 of 2 properties matching "pine" filtered by Plot'
    coordinator.search_term = "nothing"
    assert coordinator.empty_text() == "Try adjusting your search criteria"


def test_detail_overlay(store):
    store.start()
    coordinator = CatalogCoordinator(store)
    prop = store.properties[0]
    coordinator.view_details(prop)
    assert coordinator.is_modal_open
    assert coordinator.selected_property is prop
    coordinator.close_details()
    assert not coordinator.is_modal_open
    assert coordinator.selected_property is None


def test_successful_submit_closes_form_and_reloads(store, backend):
    store.start()
    coordinator = CatalogCoordinator(store)
    coordinator.open_form()
    result = coordinator.submit_new(_candidate())
    assert result.ok
    assert backend.get_calls == 2
    assert not coordinator.is_form_open
    assert not coordinator.is_adding_property
    assert "Lakeside Lot" in [p.name for p in store.properties]


def test_failed_submit_keeps_form_open(store, backend):
    store.start()
    coordinator = CatalogCoordinator(store)
    coordinator.open_form()
    backend.fail_post = True
    result = coordinator.submit_new(_candidate())
    assert not result.ok
    assert coordinator.is_form_open
    assert coordinator.form_error() == "Failed to add property"
    # a rejected create is not a page-level failure
    assert coordinator.view_state() == READY
    assert not coordinator.is_adding_property


def test_submit_marks_in_flight(backend):
    seen = []

    class RecordingStore(PropertyStore):
        def create(self, candidate):
            seen.append(coordinator.is_adding_property)
            return super().create(candidate)

    store = RecordingStore(base_url=API_URL, client=backend.client())
    store.start()
    coordinator = CatalogCoordinator(store)
    coordinator.submit_new(_candidate())
    assert seen == [True]
    assert not coordinator.is_adding_property


def test_drawn_overlay_is_gone_on_next_render(store):
    store.start()
    coordinator = CatalogCoordinator(store)
    coordinator.begin_render()
    assert coordinator.overlay_to_draw() is None

    coordinator.view_details(store.properties[0])
    coordinator.begin_render()
    assert coordinator.overlay_to_draw() == DETAILS

    # the user dismissed the dialog, then typed a search term
    coordinator.begin_render()
    coordinator.search_term = "oak"
    assert coordinator.overlay_to_draw() is None
    assert not coordinator.is_modal_open
    assert coordinator.selected_property is None


def test_form_opened_during_render_is_drawn_once(store):
    store.start()
    coordinator = CatalogCoordinator(store)
    coordinator.begin_render()
    coordinator.open_form()
    assert coordinator.overlay_to_draw() == FORM
    coordinator.begin_render()
    assert not coordinator.is_form_open
    assert coordinator.overlay_to_draw() is None


def test_details_take_precedence_over_form(store):
    store.start()
    coordinator = CatalogCoordinator(store)
    coordinator.open_form()
    coordinator.view_details(store.properties[1])
    assert coordinator.overlay_to_draw() == DETAILS
