"""passforge -- Streamlit web interface."""

import streamlit as st

from passforge import (
    CharsetOptions,
    PassforgeError,
    analyse_strength,
    calculate_entropy,
    calculate_password_entropy,
    clamp_password_length,
    clamp_word_count,
    generate_passphrase,
    generate_password,
)
from passforge.config import get_settings

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_LOCK = _LUCIDE.format(s=32, paths=(
    '<rect width="18" height="11" x="3" y="11" rx="2" ry="2"/>'
    '<path d="M7 11V7a5 5 0 0 1 10 0v4"/>'
))

ICON_KEY_ROUND = _LUCIDE.format(s=20, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

ICON_BOOK = _LUCIDE.format(s=20, paths=(
    '<path d="M12 7v14"/>'
    '<path d="M3 18a1 1 0 0 1-1-1V4a1 1 0 0 1 1-1h5a4 4 0 0 1 4 4 4 4 0 0 1 4-4h5'
    'a1 1 0 0 1 1 1v13a1 1 0 0 1-1 1h-6a3 3 0 0 0-3 3 3 3 0 0 0-3-3z"/>'
))

ICON_GAUGE = _LUCIDE.format(s=20, paths=(
    '<path d="m12 14 4-4"/><path d="M3.34 19a10 10 0 1 1 17.32 0"/>'
))

LABEL_COLORS = {
    "weak": "#d32f2f",
    "medium": "#fbc02d",
    "strong": "#388e3c",
    "very strong": "#1b5e20",
}

settings = get_settings()

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_LOCK} Password Generator</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Generate strong passwords and passphrases, or check an existing one.  \n"
    "Everything runs locally - nothing you type or generate is sent anywhere."
)


def _section(icon: str, title: str) -> None:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{icon} <strong>{title}</strong></p>',
        unsafe_allow_html=True,
    )


def _show_strength(report: dict) -> None:
    color = LABEL_COLORS[report["label"]]
    st.markdown(
        f"**Strength:** <span style='color:{color}'>{report['label']}</span>"
        f" &nbsp;·&nbsp; {report['score']}/100",
        unsafe_allow_html=True,
    )
    st.progress(report["score"] / 100)


tab_password, tab_passphrase, tab_check = st.tabs(
    ["Password", "Passphrase", "Check Password"]
)

# ── Password tab ───────────────────────────────────────────────────────────

with tab_password:
    _section(ICON_KEY_ROUND, "Generate a secure password")
    col1, col2 = st.columns(2)
    with col1:
        length = st.slider("Length", 6, 64, clamp_password_length(settings.DEFAULT_LENGTH))
    with col2:
        options = CharsetOptions(
            lower=st.checkbox("Lowercase", value=True),
            upper=st.checkbox("Uppercase", value=True),
            numbers=st.checkbox("Digits", value=True),
            symbols=st.checkbox("Symbols", value=True),
        )

    if st.button("Generate password", type="primary"):
        try:
            pwd = generate_password(length, options)
        except PassforgeError as exc:
            st.error(f"**Cannot generate password:** {exc}")
        else:
            st.code(pwd, language=None)
            _show_strength(analyse_strength(pwd))
            st.caption(f"{calculate_password_entropy(length, options):.1f} bits of entropy")

# ── Passphrase tab ─────────────────────────────────────────────────────────

with tab_passphrase:
    _section(ICON_BOOK, "Generate a passphrase")
    col1, col2 = st.columns(2)
    with col1:
        word_count = st.slider("Words", 3, 12, clamp_word_count(settings.DEFAULT_WORD_COUNT))
    with col2:
        separator = st.text_input("Separator", value=settings.DEFAULT_SEPARATOR, max_chars=10)

    if st.button("Generate passphrase", type="primary"):
        try:
            phrase = generate_passphrase(word_count, separator)
        except PassforgeError as exc:
            st.error(f"**Cannot generate passphrase:** {exc}")
        else:
            st.code(phrase, language=None)
            st.caption(f"Entropy: ~{calculate_entropy(word_count):.1f} bits")

# ── Check tab ──────────────────────────────────────────────────────────────

with tab_check:
    _section(ICON_GAUGE, "Check a password")
    password = st.text_input(
        "Password",
        type="password",
        placeholder="Enter a password…",
        autocomplete="off",
    )

    if password:
        _show_strength(analyse_strength(password))
