import functools, traceback
import streamlit as st
from doc_sidebar.utils.logging import logger

def ui_error_boundary(fn):
    @functools.wraps(fn)
    def _wrap(*a, **k):
        try:
            return fn(*a, **k)
        except Exception as e:
            logger.error("UI error in %s: %s", fn.__name__, e, exc_info=True)
            st.error("Unexpected error. See details below.")
            with st.expander("Error details"):
                st.code("".join(traceback.format_exception(type(e), e, e.__traceback__)))
    return _wrap

def handle_fatal(e: Exception) -> None:
    logger.critical("Fatal error: %s", e, exc_info=True)
    st.error("Critical error, the preview cannot continue.")
    st.stop()
