THEMES = {
    "light": {
        "background": "#f3f4f6",
        "surface": "#ffffff",
        "surface_alt": "#f9fafb",
        "text": "#111827",
        "muted": "#4b5563",
        "border": "#d1d5db",
        "header_text": "#1f2937",
        "header_bg": "#f3f4f6",
        "header_border": "#6b7280",
        "positive": "#bbf7d0",
        "negative": "#fecaca",
    },
    "dark": {
        "background": "#171717",
        "surface": "#000000",
        "surface_alt": "#0a0a0a",
        "text": "#33ff99",
        "muted": "#29cc7a",
        "border": "#15803d",
        "header_text": "#fde047",
        "header_bg": "#000000",
        "header_border": "#facc15",
        "positive": "#14532d",
        "negative": "#7f1d1d",
    },
}

DEFAULT_THEME = "light"


def palette(theme: str) -> dict:
    return THEMES.get(theme, THEMES[DEFAULT_THEME])


def toggle(theme: str) -> str:
    return "light" if theme == "dark" else "dark"


def toggle_label(theme: str) -> str:
    """Button caption names the theme you would switch to."""
    return "Light Mode" if theme == "dark" else "Dark Mode"


def pill_colour(ok: bool, theme: str) -> str:
    p = palette(theme)
    return p["positive"] if ok else p["negative"]


def panel_html(rows, theme: str) -> str:
    """
    One panel as a single HTML block: a .pw-panel wrapper holding a .pw-row
    per (label, value, tone) row, so the even-row stripe applies.
    """
    parts = []
    for label, value, tone in rows:
        if tone == "neutral":
            span = f'<span class="pw-value">{value}</span>'
        else:
            bg = pill_colour(tone == "positive", theme)
            span = f'<span class="pw-pill" style="background-color:{bg};">{value}</span>'
        parts.append(f'<div class="pw-row"><span>{label}</span>{span}</div>')
    return '<div class="pw-panel">' + "".join(parts) + "</div>"


def css(theme: str) -> str:
    """Page-level CSS injected with st.markdown(unsafe_allow_html=True)."""
    p = palette(theme)
    return f"""
<style>
    .stApp {{
        background-color: {p["background"]};
        color: {p["text"]};
    }}
    .stApp h1, .stApp h2, .stApp h3, .stApp label, .stApp p {{
        color: {p["text"]};
        font-family: monospace;
    }}
    .pw-header {{
        border: 1px solid {p["header_border"]};
        background-color: {p["header_bg"]};
        color: {p["header_text"]};
        padding: 0.5rem;
        font-weight: 700;
        text-align: center;
        letter-spacing: 0.2em;
        text-transform: uppercase;
        font-family: monospace;
    }}
    .pw-row {{
        border: 1px solid {p["border"]};
        background-color: {p["surface"]};
        padding: 0.6rem 0.75rem;
        font-family: monospace;
        font-size: 0.9rem;
        display: flex;
        justify-content: space-between;
    }}
    .pw-panel > .pw-row:nth-child(even) {{
        background-color: {p["surface_alt"]};
    }}
    .pw-value {{
        font-weight: 600;
    }}
    .pw-pill {{
        padding: 0.1rem 0.5rem;
        border-radius: 0.25rem;
        font-weight: 600;
    }}
    .pw-footer {{
        color: {p["muted"]};
        font-size: 0.75rem;
        font-style: italic;
        letter-spacing: 0.2em;
        margin-top: 1.5rem;
    }}
</style>
"""
