import streamlit as st


class StateManager:
    """Session state namespaced as ``scope:id:key``, e.g. the draft of one bundle form."""

    @staticmethod
    def key(scope: str, id_, key: str) -> str:
        return f"{scope}:{id_}:{key}"

    @staticmethod
    def get(scope: str, id_, key: str, default=None):
        return st.session_state.get(StateManager.key(scope, id_, key), default)

    @staticmethod
    def set(scope: str, id_, key: str, value):
        st.session_state[StateManager.key(scope, id_, key)] = value

    @staticmethod
    def setdefault(scope: str, id_, key: str, value):
        full_key = StateManager.key(scope, id_, key)
        if full_key not in st.session_state:
            st.session_state[full_key] = value
        return st.session_state[full_key]

    @staticmethod
    def clear(scope: str, id_):
        prefix = f"{scope}:{id_}:"
        for k in [k for k in st.session_state if k.startswith(prefix)]:
            del st.session_state[k]
