"""PassMeter -- Streamlit web interface."""

import streamlit as st

from passmeter import InvalidSelectionError, generate_password, strength_report
from passmeter.config import clamp_length, get_settings

settings = get_settings()

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=32, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_KEY_ROUND} Password Generator</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Passwords are generated with Python's `secrets` module and never leave "
    "this page."
)

# ── Length controls (slider and number input stay in sync) ────────────────

if "length_slider" not in st.session_state:
    st.session_state.length_slider = clamp_length(settings.default_length)
    st.session_state.length_input = st.session_state.length_slider


def _slider_changed():
    st.session_state.length_input = st.session_state.length_slider


def _input_changed():
    value = clamp_length(st.session_state.length_input)
    st.session_state.length_input = value
    st.session_state.length_slider = value


col1, col2 = st.columns(2)
with col1:
    st.slider(
        "Length", settings.min_length, settings.max_length,
        key="length_slider", on_change=_slider_changed,
    )
    st.number_input(
        "Exact length",
        min_value=settings.min_length, max_value=settings.max_length, step=1,
        key="length_input", on_change=_input_changed,
    )
with col2:
    flags = {
        "uppercase": st.checkbox("Uppercase (A-Z)", value=True, key="uppercase"),
        "lowercase": st.checkbox("Lowercase (a-z)", value=True, key="lowercase"),
        "digits": st.checkbox("Numbers (0-9)", value=True, key="numbers"),
        "symbols": st.checkbox("Special (!@#...)", value=True, key="special"),
    }

# Every widget change reruns the script, so a fresh password is produced on
# load, on any option change and on the button.
st.button("Generate password", type="primary", key="generate")

try:
    pwd = generate_password(st.session_state.length_slider, **flags)
except InvalidSelectionError as exc:
    st.error(str(exc))
    st.stop()

st.code(pwd, language=None)

report = strength_report(pwd, **flags)
st.markdown(
    f'<div style="background:#e0e0e0;border-radius:4px;height:10px">'
    f'<div style="width:{report["score"]}%;height:100%;border-radius:4px;'
    f'background-color:{report["color"]}"></div></div>',
    unsafe_allow_html=True,
)
st.markdown(
    f"**Strength:** <span style='color:{report['color']}'>{report['label']}</span>"
    f" &nbsp;·&nbsp; {report['score']}/100",
    unsafe_allow_html=True,
)
