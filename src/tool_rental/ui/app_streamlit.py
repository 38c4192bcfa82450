"""
Streamlit UI for the tool rental counter.

Features:
- Tool picker with the catalog's charge policy
- Checkout form (rental days, discount, checkout date)
- Printable rental agreement and calculation trace
"""
import streamlit as st
import pandas as pd
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from tool_rental.engine import PricingEngine
from tool_rental.engine.charge_calendar import holidays_for_year
from tool_rental.engine.formatting import format_agreement, format_money
from tool_rental.exceptions import ValidationError


st.set_page_config(
    page_title="Tool Rental Checkout",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine()


try:
    engine = get_engine()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SIDEBAR: Catalog
# ============================================================================
with st.sidebar:
    st.header("🧰 Tool Catalog")

    catalog_df = pd.DataFrame([
        {
            "Code": tool.code,
            "Type": tool.type,
            "Brand": tool.brand,
            "Daily": format_money(tool.daily_charge),
            "Weekday": tool.weekday_charge,
            "Weekend": tool.weekend_charge,
            "Holiday": tool.holiday_charge,
        }
        for tool in engine.catalog
    ])
    st.dataframe(catalog_df, hide_index=True, use_container_width=True)

    report = engine.catalog.report
    if report.get("warnings"):
        with st.expander(f"⚠️ {len(report['warnings'])} catalog warnings"):
            for warning in report["warnings"]:
                st.caption(warning)


# ============================================================================
# MAIN: Checkout
# ============================================================================
st.title("Tool Rental Checkout")

with st.form("checkout_form"):
    col1, col2 = st.columns(2)
    with col1:
        tool_code = st.selectbox("Tool Code", engine.catalog.codes())
        rental_days = st.number_input("Rental Days", min_value=0, value=5, step=1)
    with col2:
        discount_percent = st.number_input("Discount %", min_value=0, max_value=100, value=0, step=1)
        checkout_date = st.date_input("Checkout Date", value=date.today())
    submitted = st.form_submit_button("Check Out", type="primary")

if submitted:
    try:
        agreement = engine.checkout(
            tool_code=tool_code,
            rental_days=int(rental_days),
            discount_percent=int(discount_percent),
            checkout_date=checkout_date,
        )
    except ValidationError as e:
        st.error(str(e))
        st.stop()

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Charge Days", agreement.charge_days)
    m2.metric("Pre-Discount", format_money(agreement.pre_discount_charge))
    m3.metric("Discount", format_money(agreement.discount_amount))
    m4.metric("Final Charge", format_money(agreement.final_charge))

    st.subheader("Rental Agreement")
    st.code("\n".join(format_agreement(agreement)), language=None)

    with st.expander("🔍 Calculation Details"):
        for t in agreement.trace:
            if t.value:
                st.caption(f"**{t.step}**: {t.description} = `{t.value}`")
            else:
                st.caption(f"**{t.step}**: {t.description}")

    with st.expander(f"📅 Holidays in {checkout_date.year}"):
        for holiday in holidays_for_year(checkout_date.year):
            st.caption(holiday.strftime("%a %m/%d/%y"))
