import streamlit as st


def init_state() -> None:
    """Initialize Streamlit state keys used by the UI."""
    defaults: dict[str, object] = {
        "counter": 0,
        "market_ticker": None,
        "error_msg": None,
        "ticker_loaded": False,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
