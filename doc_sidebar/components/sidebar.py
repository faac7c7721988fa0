from typing import Dict
import streamlit as st
from doc_sidebar.services import config
from doc_sidebar.utils.errors import ValidationError
from doc_sidebar.utils.logging import logger
from doc_sidebar.utils.typing import RenderConfig

LABELS = {
    "base": "Base name",
    "host": "Download host",
    "path": "Download path",
    "package": "Package name",
    "version": "Version",
}

def render() -> Dict[str, str]:
    """Collect the sidebar values; returns the raw form values."""
    values = st.session_state["sidebar_values"]
    with st.sidebar:
        st.header("Sidebar values")
        for name in RenderConfig.field_names():
            values[name] = st.text_input(LABELS[name], value=values.get(name, ""), key=f"field_{name}")

        st.divider()
        if st.button("Save"):
            try:
                path = config.save_config(RenderConfig.from_mapping(values))
                st.success(f"Saved to {path}")
            except ValidationError as e:
                st.error(str(e))
            except (OSError, ValueError) as e:
                logger.error("Saving sidebar config failed: %s", e)
                st.error(f"Could not save: {e}")
        st.caption(f"Config file: {config.config_path()}")
    return values
