"""
Documentation Sidebar Preview - Streamlit entry point
"""
import os, sys
import streamlit as st

# Ensure package imports resolve when running via 'streamlit run doc_sidebar/app/main.py'
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from doc_sidebar.utils import ui, logging as app_logging  # noqa: E402
from doc_sidebar.app import state  # noqa: E402
from doc_sidebar.components import header, preview, sidebar  # noqa: E402

def configure_page() -> None:
    st.set_page_config(
        page_title="Documentation Sidebar Preview",
        layout="wide",
        initial_sidebar_state="expanded",
    )

@ui.ui_error_boundary
def main() -> None:
    app_logging.init()
    configure_page()
    try:
        state.initialize()
    except (OSError, ValueError) as e:
        # unreadable config file or broken JSON
        ui.handle_fatal(e)
    header.render()
    values = sidebar.render()
    preview.render(values)

if __name__ == "__main__":
    main()
