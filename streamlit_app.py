# streamlit_app.py
"""
Voxi call-insights dashboard.
Ask a predefined or free-text question about customer-service calls and
see the answer from the analytics service as charts and tables.
Run:
    streamlit run streamlit_app.py
"""

import streamlit as st

from voxi.config import CONFIG
from voxi.api.factory import make_client
from voxi.api.questions import predefined_questions, display_question
from voxi.analysis.shapes import ResponseKind
from voxi.labels import t
from voxi.reporting.view import build_view
from voxi.reporting.exporter import Exporter
from voxi.state import DashboardState
from voxi.utils import setup_logging, get_logger

setup_logging()
logger = get_logger("streamlit_app")

# ---------- Page config & CSS ----------
st.set_page_config(page_title="Voxi", layout="wide")
st.markdown(
    """
    <style>
    .small-muted { color: #7a7f87; font-size: 0.9rem; }
    .logo { font-weight: 700; font-size: 1.4rem; color: #fff; padding: 4px 12px;
            border-radius: 10px; background: linear-gradient(90deg, #2563eb, #9333ea); }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------- Session ----------
if "dashboard" not in st.session_state:
    st.session_state.dashboard = DashboardState()
state: DashboardState = st.session_state.dashboard
if "export_dir" not in st.session_state:
    st.session_state.export_dir = Exporter.session_dir(CONFIG.output_dir)

st.sidebar.header("Controls")
method = st.sidebar.selectbox("Insight source", ["http", "mock"],
                              index=0 if CONFIG.use_api == "http" else 1)
CONFIG.use_api = method
lang = st.sidebar.selectbox("Language", ["zh", "en"], index=0 if CONFIG.language == "zh" else 1)
st.sidebar.caption(f"Service: `{CONFIG.api_base_url}`")

# ---------- Helpers ----------
def read_bytes(path):
    with open(path, "rb") as f:
        return f.read()

def ask(question):
    with st.spinner(t("ui.analyzing", lang)):
        state.submit(question, make_client(CONFIG))

def render_stats(view):
    if not view.stats:
        return
    cols = st.columns(len(view.stats))
    for card, col in zip(view.stats, cols):
        with col:
            st.metric(card.label, card.value if card.value is not None else "-")
            if card.caption:
                st.markdown(f"<div class='small-muted'>{card.caption}</div>", unsafe_allow_html=True)

def render_visualization(payload):
    view = build_view(payload, lang)
    if view.kind == ResponseKind.NONE:
        return

    if view.kind == ResponseKind.RAW:
        st.subheader(t("ui.rawData", lang))
        st.code(view.raw, language="json")
        return

    render_stats(view)

    # sentiment gets pie + ratio side by side, others stack
    if view.kind == ResponseKind.SENTIMENT:
        cols = st.columns(2)
        for fig, col in zip(view.figures, cols):
            with col:
                st.plotly_chart(fig, use_container_width=True)
    else:
        for fig in view.figures:
            st.plotly_chart(fig, use_container_width=True)

    st.subheader(t("ui.detailedData", lang))
    st.dataframe(view.table, use_container_width=True, hide_index=True)

    with st.expander(t("ui.rawData", lang)):
        st.json(payload)

    # downloads, rewritten only when the answer or the language changes
    export_key = (state.revision, lang)
    if st.session_state.get("export_key") != export_key:
        st.session_state.exported = Exporter.save(state.current_question, payload, view,
                                                  out_dir=st.session_state.export_dir)
        st.session_state.export_key = export_key
    saved = st.session_state.exported
    dlc = st.columns(len(saved))
    for (fname, p), col in zip(saved.items(), dlc):
        with col:
            st.download_button(label=f"Download {fname}", data=read_bytes(p), file_name=fname)

def question_box(placeholder, key):
    with st.form(key=key, clear_on_submit=True):
        query = st.text_input(placeholder, value=state.query, label_visibility="collapsed",
                              placeholder=placeholder)
        submitted = st.form_submit_button("➤")
    if submitted and query.strip():
        ask(query)
        st.rerun()

# ---------- UI ----------
if state.show_response:
    left, right = st.columns([1, 12])
    with left:
        if st.button("V", help="Home"):
            state.reset()
            st.rerun()
    with right:
        st.title(display_question(state.current_question, lang))
        st.markdown(f"<div class='small-muted'>{t('ui.analyzingData', lang)}</div>", unsafe_allow_html=True)

    st.markdown("---")
    if state.error:
        logger.warning(f"Showing error for {state.current_question!r}: {state.error}")
        st.error(f"{t('ui.error', lang)} ({state.error})")
    else:
        st.caption(state.insight_text())
        render_visualization(state.response)

    st.markdown("---")
    question_box(t("ui.whatCanHelp", lang), key="follow_up")

else:
    st.markdown("<span class='logo'>V</span>", unsafe_allow_html=True)
    st.title(t("ui.title", lang))
    st.markdown(t("ui.subtitle", lang))

    question_box(t("ui.ask", lang), key="home")

    st.markdown(f"**{t('ui.commonQuestions', lang)}**")
    for i, question in enumerate(predefined_questions()):
        if st.button(display_question(question, lang), key=f"chip_{i}"):
            ask(question)
            st.rerun()

# small footer
st.markdown("---")
st.caption("Dashboard powered by the call analytics service.")
