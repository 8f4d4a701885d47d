import altair as alt
import streamlit as st

from analytics.breakdown import outgoings_breakdown, rate_sensitivity_dataframe, results_panel
from analytics.metrics import compute
from config import DEFAULT_VALUES, RENT_PERIODS, SNAPSHOT
from logging_utils import get_logger
from models import Inputs
from presentation.snapshot import FOOTER, mime_type, render_snapshot
from presentation.theme import css, palette, panel_html, toggle, toggle_label

logger = get_logger(__name__)

st.set_page_config(page_title="Property Wizard", page_icon="🧙", layout="wide")

if "theme" not in st.session_state:
    st.session_state["theme"] = "light"


def _flip_theme():
    st.session_state["theme"] = toggle(st.session_state["theme"])
    logger.info("theme switched to %s", st.session_state["theme"])


theme = st.session_state["theme"]
p = palette(theme)
st.markdown(css(theme), unsafe_allow_html=True)


def header(title: str):
    st.markdown(f'<div class="pw-header">{title}</div>', unsafe_allow_html=True)


def panel(rows):
    st.markdown(panel_html(rows, theme), unsafe_allow_html=True)


# ------------------------- INPUTS -------------------------

title_col, export_col, theme_col = st.columns([6, 1, 1])
with title_col:
    st.title("PROPERTY WIZARD 🧙‍♂️")

exp_col, fin_col = st.columns(2, gap="small")

with exp_col:
    header("Annual Expenses")
    rates = st.number_input("Rates", value=DEFAULT_VALUES["rates"], step=100.0, format="%.0f")
    insurance = st.number_input("Insurance", value=DEFAULT_VALUES["insurance"], step=100.0, format="%.0f")
    maintenance = st.number_input("Maintenance", value=DEFAULT_VALUES["maintenance"], step=100.0, format="%.0f")
    body_corp = st.number_input("Body Corporate", value=DEFAULT_VALUES["body_corp"], step=100.0, format="%.0f")
    property_mgmt_percent = st.number_input("Property Mgmt %", value=DEFAULT_VALUES["property_mgmt_percent"], step=0.5, help="Percentage of annual rent paid to a property manager")
    rent_period = st.selectbox("Rent Period", RENT_PERIODS, index=RENT_PERIODS.index(DEFAULT_VALUES["rent_period"]), format_func=str.title)

with fin_col:
    header("Purchase & Finance")
    purchase_price = st.number_input("Purchase Price", value=DEFAULT_VALUES["purchase_price"], step=1000.0, format="%.0f")
    market_value = st.number_input("Market Value", value=DEFAULT_VALUES["market_value"], step=1000.0, format="%.0f")
    deposit_percent = st.number_input("Deposit %", value=DEFAULT_VALUES["deposit_percent"], step=1.0, help="Treated as 0-100% when calculating the loan")
    interest_rate = st.number_input("Interest Rate %", value=DEFAULT_VALUES["interest_rate"], step=0.05, help="Simple annual rate; year-one interest-only debt service")
    rent = st.number_input("Rent", value=DEFAULT_VALUES["rent"], step=10.0, format="%.0f", help="Rent per selected rent period")
    vacancy_weeks = st.number_input("Vacant Weeks (p.a.)", value=DEFAULT_VALUES["vacancy_weeks"], step=1.0, help="Treated as 0-52 weeks")

inputs = Inputs(
    purchase_price=purchase_price, market_value=market_value, deposit_percent=deposit_percent,
    interest_rate=interest_rate, rent=rent, rent_period=rent_period, vacancy_weeks=vacancy_weeks,
    rates=rates, insurance=insurance, maintenance=maintenance, body_corp=body_corp,
    property_mgmt_percent=property_mgmt_percent,
)

# ------------------------- RESULTS -------------------------

res = compute(inputs)
rpanel = results_panel(res)

inc_col, perf_col = st.columns(2, gap="small")
for col, name in ((inc_col, "Income"), (perf_col, "Performance Summary")):
    with col:
        header(name)
        rows = rpanel[rpanel["Panel"] == name]
        panel(rows[["Label", "Value", "Tone"]].itertuples(index=False, name=None))

with export_col:
    st.download_button(
        "Download JPG",
        data=render_snapshot(inputs, res, theme=theme, fmt="jpeg"),
        file_name=SNAPSHOT["file_name"],
        mime=mime_type("jpeg"),
    )
with theme_col:
    st.button(toggle_label(theme), on_click=_flip_theme)

# ------------------------- CHARTS -------------------------

chart_left, chart_right = st.columns([1, 2], gap="medium")

with chart_left:
    st.markdown("### Annual Outgoings Mix")
    odf = outgoings_breakdown(inputs, res)
    odf = odf[odf["Amount"] > 0]
    if odf.empty:
        st.caption("No outgoings entered yet.")
    else:
        pie_chart = alt.Chart(odf).mark_arc(innerRadius=50, outerRadius=110).encode(
            theta=alt.Theta("Amount:Q"),
            color=alt.Color("Category:N", legend=alt.Legend(orient="left", titleLimit=0, labelLimit=0)),
            tooltip=["Category:N", alt.Tooltip("Amount:Q", format=",.0f")],
        )
        st.altair_chart(pie_chart, use_container_width=False)

with chart_right:
    st.markdown("### Sensitivity — Interest Rate")
    sdf = rate_sensitivity_dataframe(inputs)
    line = alt.Chart(sdf).mark_line(point=True, color=p["muted"]).encode(
        x=alt.X("Interest Rate (%):Q", title="Interest rate (%)"),
        y=alt.Y("Weekly Cash Flow:Q", title="Weekly cash flow", axis=alt.Axis(format=",.0f")),
        tooltip=[alt.Tooltip("Interest Rate (%):Q"), alt.Tooltip("Weekly Cash Flow:Q", format=",.2f"),
                 alt.Tooltip("Annual Cash Flow:Q", format=",.0f")],
    ).properties(height=300)
    st.altair_chart(line, use_container_width=True)
    st.caption("Debt service is year-one simple interest on the loan; every other input is held fixed.")

st.markdown(f'<div class="pw-footer">{FOOTER}</div>', unsafe_allow_html=True)
