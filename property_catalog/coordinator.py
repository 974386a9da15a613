"""UI-side state for one catalog session, independent of the view toolkit."""

from typing import List, Optional

from .filters import filter_properties, property_types
from .log import get_logger
from .models import NewProperty, Property
from .store import FETCH, SUBMIT, OperationResult, PropertyStore
from .summary import backend_hint, empty_state_message, results_summary

logger = get_logger(__name__)

LOADING = "loading"
ERROR = "error"
READY = "ready"

DETAILS = "details"
FORM = "form"


class CatalogCoordinator:
    """Wires the store into filtering and tracks which overlays are open.

    Holds no records of its own; everything list-shaped is read from the
    store on demand.
    """

    def __init__(self, store: PropertyStore):
        self.store = store
        self.search_term = ""
        self.selected_type = ""
        self.selected_property: Optional[Property] = None
        self.is_modal_open = False
        self.is_form_open = False
        self.is_adding_property = False
        self._overlay_drawn = False

    def view_state(self) -> str:
        if self.store.loading:
            return LOADING
        # a failed create is reported inside the form, not as a page error
        if self.store.error and self.store.error_kind == FETCH:
            return ERROR
        return READY

    def form_error(self) -> Optional[str]:
        if self.store.error_kind == SUBMIT:
            return self.store.error
        return None

    def error_hint(self) -> str:
        return backend_hint(self.store.base_url)

    def visible_properties(self) -> List[Property]:
        return filter_properties(
            self.store.properties, self.search_term, self.selected_type
        )

    def available_types(self) -> List[str]:
        return property_types(self.store.properties)

    def summary_text(self) -> str:
        return results_summary(
            len(self.visible_properties()),
            len(self.store.properties),
            self.search_term,
            self.selected_type,
        )

    def empty_text(self) -> str:
        return empty_state_message(self.search_term, self.selected_type)

    # detail overlay

    def view_details(self, prop: Property) -> None:
        self.selected_property = prop
        self.is_modal_open = True

    def close_details(self) -> None:
        self.is_modal_open = False
        self.selected_property = None

    # creation overlay

    def open_form(self) -> None:
        self.is_form_open = True

    def close_form(self) -> None:
        self.is_form_open = False

    def submit_new(self, candidate: NewProperty) -> OperationResult:
        """Create the listing; the form only closes when the create succeeded."""
        self.is_adding_property = True
        try:
            result = self.store.create(candidate)
        finally:
            self.is_adding_property = False
        if result.ok:
            self.is_form_open = False
        else:
            logger.info("keeping add form open: %s", result.error)
        return result

    # page renders

    def begin_render(self) -> None:
        """Mark the start of a full page render.

        Overlays are modal, so a full render after one was drawn means it is
        gone: closed by its own button, or dismissed from outside.
        """
        if self._overlay_drawn:
            self.close_details()
            self.close_form()
            self._overlay_drawn = False

    def overlay_to_draw(self) -> Optional[str]:
        """The overlay this render should show, if any; detail view wins."""
        if self.is_modal_open and self.selected_property is not None:
            overlay: Optional[str] = DETAILS
        elif self.is_form_open:
            overlay = FORM
        else:
            return None
        self._overlay_drawn = True
        return overlay
