import streamlit as st


def refresh_every(seconds: int):
    """
    Decorator that reruns only the wrapped section every ``seconds`` so a list
    picks up backend changes without a full page rerun.
    """
    return st.fragment(run_every=seconds)
