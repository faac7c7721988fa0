import streamlit as st

def render() -> None:
    st.markdown(
        """
        <style>
        .ds-header{background:linear-gradient(90deg,#1f4e79,#2d5a87);padding:12px;border-radius:8px;margin:8px 0 16px}
        .ds-header h1{color:#fff;margin:0;text-align:center;font-weight:700}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.markdown('<div class="ds-header"><h1>Documentation Sidebar Preview</h1></div>', unsafe_allow_html=True)
