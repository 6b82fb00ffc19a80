import streamlit as st

from healthfinder.client.api_client import DirectoryClient
from healthfinder.client.search_session import (
    MIN_QUERY_LENGTH,
    RECENT_SEARCHES_SHOWN,
    detail_form,
    directions_url,
)
from healthfinder.errors import FacilityDirectoryError

st.set_page_config(page_title="HealthFinder", layout="centered")
st.title("HealthFinder")
st.caption("Search for hospitals, pharmacies, and clinics in your area")

client = DirectoryClient()

if "selected" not in st.session_state:
    st.session_state.selected = None
if "query" not in st.session_state:
    st.session_state.query = ""


@st.cache_data(ttl=60, show_spinner=False)
def search(query: str):
    # Cached per query string, so a rerun only ever shows results for the text it was given.
    return client.search_facilities(query)


def select(facility, typed: str):
    st.session_state.selected = facility
    st.session_state.query = facility.name
    try:
        client.append_history(typed.strip() or facility.name, facility_id=facility.id)
    except FacilityDirectoryError as e:
        print(f"[CLIENT] Could not save search history: {e}")


def clear():
    st.session_state.selected = None
    st.session_state.query = ""


query = st.text_input("Search for hospitals, pharmacies, or clinics...", key="query")
selected = st.session_state.selected

# Streamlit submits on enter/blur, which stands in for the debounce timer here.
if len(query.strip()) >= MIN_QUERY_LENGTH and not (selected and selected.name == query):
    with st.spinner("Searching..."):
        try:
            facilities = search(query.strip())
        except FacilityDirectoryError as e:
            facilities = None
            st.error(e.public_message)

    if facilities is not None and not facilities:
        st.info(f'No facilities found for "{query}". Try a different search term.')
    for facility in facilities or []:
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"**{facility.name}** · {facility.type.capitalize()}")
            st.caption(facility.address)
            details = " · ".join(x for x in (facility.phone, facility.hours, facility.distance) if x)
            if details:
                st.caption(details)
            if facility.rating:
                st.caption(f"Rating: {facility.rating}")
        with col2:
            st.button("Select", key=f"select-{facility.id}", on_click=select, args=(facility, query))

st.markdown("---")

form = detail_form(selected)
col1, col2 = st.columns(2)
with col1:
    st.text_input("Facility Name", value=form["name"], placeholder="Selected facility will appear here", disabled=True)
    st.text_input("Address", value=form["address"], placeholder="Full address will be auto-filled", disabled=True)
    st.text_input("Operating Hours", value=form["hours"], placeholder="Hours will be auto-filled", disabled=True)
with col2:
    st.text_input("Facility Type", value=form["type"], placeholder="Hospital, Pharmacy, or Clinic", disabled=True)
    st.text_input("Phone Number", value=form["phone"], placeholder="Phone number will be auto-filled", disabled=True)

col1, col2, col3 = st.columns(3)
with col1:
    if st.button("Save Facility", disabled=selected is None):
        st.success(f"{selected.name} has been saved to your locations.")
with col2:
    url = directions_url(selected)
    if url:
        st.link_button("Get Directions", url)
    else:
        st.button("Get Directions", disabled=True)
with col3:
    st.button("Clear", on_click=clear)

try:
    history = client.list_history()
except FacilityDirectoryError as e:
    history = []
    print(f"[CLIENT] Failed to fetch search history: {e}")

if history:
    st.subheader("Recent Searches")
    for entry in history[:RECENT_SEARCHES_SHOWN]:
        label = entry.facility.name if entry.facility else entry.search_query
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"**{label}**")
            st.caption(f'"{entry.search_query}" · {entry.created_at:%Y-%m-%d}')
        with col2:
            if entry.facility:
                st.button("Select", key=f"history-{entry.id}", on_click=select, args=(entry.facility, entry.search_query))
