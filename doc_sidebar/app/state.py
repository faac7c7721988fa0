import streamlit as st
from doc_sidebar.utils.errors import ConfigNotFoundError, ValidationError
from doc_sidebar.utils.logging import logger
from doc_sidebar.services import config

def initialize() -> None:
    if st.session_state.get("_initialized"):
        return
    logger.info("Initializing preview session state")

    try:
        stored = config.load_config()
    except ConfigNotFoundError:
        stored = config.DEFAULT_CONFIG
    except ValidationError as e:
        logger.warning("stored sidebar config ignored: %s", e)
        stored = config.DEFAULT_CONFIG

    st.session_state.setdefault("sidebar_values", stored.to_dict())
    st.session_state["_initialized"] = True
