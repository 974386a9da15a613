# streamlit_app.py
# Run with: streamlit run property_catalog/streamlit_app.py
import streamlit as st

from property_catalog.config import (
    DEFAULT_SQFT,
    LOG_FORMAT,
    LOG_LEVEL,
    PLACEHOLDER_IMAGE,
    PROPERTY_TYPES,
)
from property_catalog.coordinator import (
    DETAILS,
    ERROR,
    FORM,
    LOADING,
    CatalogCoordinator,
)
from property_catalog.format import (
    format_coordinates,
    format_price,
    format_sqft,
    make_property_card,
)
from property_catalog.log import setup_logging
from property_catalog.models import Coordinates, NewProperty, Property
from property_catalog.store import PropertyStore

ALL_TYPES = "All Types"
GRID_COLUMNS = 3


@st.cache_resource
def _configure_logging() -> bool:
    setup_logging(LOG_LEVEL, LOG_FORMAT)
    return True


def get_coordinator() -> CatalogCoordinator:
    """One store and coordinator per browser session; first access loads."""
    if "catalog" not in st.session_state:
        st.session_state.catalog = CatalogCoordinator(PropertyStore())
    coordinator: CatalogCoordinator = st.session_state.catalog
    if not coordinator.store.started:
        with st.spinner("Loading properties..."):
            coordinator.store.start()
    return coordinator


def render_error(coordinator: CatalogCoordinator) -> None:
    st.error("**Unable to Load Properties**")
    st.write(coordinator.store.error)
    st.caption(coordinator.error_hint())
    if st.button("Retry"):
        with st.spinner("Loading properties..."):
            coordinator.store.refetch()
        st.rerun()


def render_filter_bar(coordinator: CatalogCoordinator) -> None:
    search_col, type_col, add_col = st.columns([3, 2, 1], vertical_alignment="bottom")
    with search_col:
        coordinator.search_term = st.text_input(
            "Search", key="search_term", placeholder="Search by name or location..."
        )
    with type_col:
        options = [ALL_TYPES] + coordinator.available_types()
        choice = st.selectbox("Type", options, key="selected_type")
        coordinator.selected_type = "" if choice == ALL_TYPES else choice
    with add_col:
        if st.button("Add Property", type="primary", width="stretch"):
            coordinator.open_form()


def render_card(coordinator: CatalogCoordinator, prop: Property) -> None:
    card = make_property_card(prop)
    with st.container(border=True):
        if card["image"]:
            st.image(card["image"], width="stretch")
        st.markdown(f"**{card['title']}**  \n`{card['type']}`")
        st.caption(f"📍 {card['location']}")
        st.write(card["excerpt"])
        st.markdown(f"{card['sqft']} · **{card['price']}**")
        if st.button("View Details", key=f"view-{card['slug']}"):
            coordinator.view_details(prop)
            st.rerun()


def render_grid(coordinator: CatalogCoordinator) -> None:
    visible = coordinator.visible_properties()
    st.caption(coordinator.summary_text())
    if not visible:
        st.subheader("No properties found")
        st.write(coordinator.empty_text())
        return
    for start in range(0, len(visible), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for column, prop in zip(columns, visible[start : start + GRID_COLUMNS]):
            with column:
                render_card(coordinator, prop)


@st.dialog("Property Details", width="large")
def property_dialog(coordinator: CatalogCoordinator, prop: Property) -> None:
    if prop.image:
        st.image(prop.image, width="stretch")
    st.header(prop.name)
    st.caption(f"{prop.type} · 📍 {prop.location}")
    price_col, area_col = st.columns(2)
    price_col.metric("Price", format_price(prop.price))
    area_col.metric("Area", format_sqft(prop.sqft))
    st.subheader("Description")
    st.write(prop.full_description)
    st.subheader("Location")
    st.write(f"Coordinates: {format_coordinates(prop)}")
    st.info("Interactive map is not available.")
    if st.button("Close"):
        coordinator.close_details()
        st.rerun()


@st.dialog("Add New Property", width="large")
def add_property_dialog(coordinator: CatalogCoordinator) -> None:
    with st.form("add-property"):
        name_col, type_col = st.columns(2)
        name = name_col.text_input("Property Name *", placeholder="Enter property name")
        prop_type = type_col.selectbox("Property Type *", PROPERTY_TYPES)
        location = st.text_input("Location *", placeholder="Enter location (City, State)")
        price_col, sqft_col = st.columns(2)
        price = price_col.number_input("Price *", min_value=0, value=0, step=1000)
        sqft = sqft_col.number_input("Sq Ft", min_value=0, value=DEFAULT_SQFT, step=50)
        description = st.text_area("Short Description *")
        full_description = st.text_area("Full Description")
        image = st.text_input("Image URL", value=PLACEHOLDER_IMAGE)
        lat_col, lng_col = st.columns(2)
        lat = lat_col.number_input("Latitude", value=0.0, format="%.6f")
        lng = lng_col.number_input("Longitude", value=0.0, format="%.6f")
        submitted = st.form_submit_button(
            "Add Property", type="primary", disabled=coordinator.is_adding_property
        )

    if submitted:
        candidate = NewProperty(
            name=name,
            type=prop_type,
            location=location,
            price=price,
            description=description,
            full_description=full_description,
            sqft=sqft,
            image=image,
            coordinates=Coordinates(lat=lat, lng=lng),
        )
        with st.spinner("Adding property..."):
            result = coordinator.submit_new(candidate)
        if result.ok:
            st.rerun()
        st.error(coordinator.form_error() or result.error)

    if st.button("Cancel"):
        coordinator.close_form()
        st.rerun()


def main() -> None:
    st.set_page_config(page_title="Property Listings", layout="wide")
    _configure_logging()
    coordinator = get_coordinator()
    coordinator.begin_render()

    state = coordinator.view_state()
    if state == LOADING:
        st.info("Loading properties...")
        return
    if state == ERROR:
        render_error(coordinator)
        return

    st.title("🏠 Property Listings")
    st.caption("Discover your perfect future")
    render_filter_bar(coordinator)
    render_grid(coordinator)

    overlay = coordinator.overlay_to_draw()
    if overlay == DETAILS:
        property_dialog(coordinator, coordinator.selected_property)
    elif overlay == FORM:
        add_property_dialog(coordinator)


main()
