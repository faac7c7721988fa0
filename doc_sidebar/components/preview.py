from typing import Dict
import pandas as pd
import streamlit as st
import streamlit.components.v1 as components
from doc_sidebar.services import renderer
from doc_sidebar.utils.errors import ValidationError
from doc_sidebar.utils.ui import ui_error_boundary
from doc_sidebar.utils.typing import RenderConfig

def _fields_frame(cfg: RenderConfig) -> pd.DataFrame:
    rows = [{"field": k, "value": v} for k, v in cfg.to_dict().items()]
    rows.append({"field": "download url", "value": renderer.download_url(cfg)})
    return pd.DataFrame(rows)

@ui_error_boundary
def render(values: Dict[str, str]) -> None:
    try:
        cfg = RenderConfig.from_mapping(values)
    except ValidationError as e:
        st.error(str(e))
        return

    html = renderer.render_text(cfg)

    col1, col2 = st.columns([1, 2])
    with col1:
        st.subheader("Rendered")
        components.html(html, height=420, scrolling=True)
    with col2:
        st.subheader("Markup")
        st.code(html, language="html")
        st.download_button(
            "Download fragment",
            data=html,
            file_name="sidebar.html",
            mime="text/html",
        )

    st.subheader("Interpolated values")
    st.dataframe(_fields_frame(cfg), hide_index=True)
