# apps/streamlit_app/Home.py
import logging
from enum import Enum

import streamlit as st

# --- make the project root importable on Streamlit Cloud ---
import sys, os
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
# -----------------------------------------------------------

from core.form import submit
from core.net_salary import withholding_breakdown
from core.schema import MaritalStatus, PayPeriods
from core.settings import bootstrap_env

logger = logging.getLogger("salarioneto.app")


class View(Enum):
    FORM = "form"
    RESULT = "result"


# -------------------------------------------------
# App configuration
# -------------------------------------------------
settings = bootstrap_env(ROOT_DIR)
st.set_page_config(page_title=settings.page_title, layout="centered")
st.title(settings.page_title)

# -------------------------------------------------
# Session state
# -------------------------------------------------
# Form values live outside the widget keys: Streamlit drops widget state for
# widgets that are not rendered, and the form is hidden on the result view.
if "form_values" not in st.session_state:
    st.session_state.form_values = {
        "gross_salary": "",
        "pay_periods": PayPeriods.TWELVE,
        "age": "",
        "dependents": "",
        "marital_status": MaritalStatus.SINGLE,
        "disability": "",
    }
if "view" not in st.session_state:
    st.session_state.view = View.FORM.value
if "result" not in st.session_state:
    st.session_state.result = None


def _on_calculate():
    ss = st.session_state
    values = {
        "gross_salary": ss.gross_salary_input,
        "pay_periods": ss.pay_periods_input,
        "age": ss.age_input,
        "dependents": ss.dependents_input,
        "marital_status": ss.marital_status_input,
        "disability": ss.disability_input,
    }
    ss.form_values = values
    ss.result = submit(
        values["gross_salary"],
        values["pay_periods"],
        values["age"],
        values["dependents"],
        values["marital_status"],
        values["disability"],
    )
    ss.view = View.RESULT.value
    logger.debug("Switched to result view (ok=%s)", ss.result.ok)


def _on_back():
    st.session_state.view = View.FORM.value
    logger.debug("Switched to form view")


# ===============================
# FORM VIEW
# ===============================
def render_form():
    fv = st.session_state.form_values
    pay_options = list(PayPeriods)
    status_options = list(MaritalStatus)

    st.text_input("Salario bruto", value=fv["gross_salary"], key="gross_salary_input")
    st.selectbox(
        "Número de pagas",
        pay_options,
        index=pay_options.index(fv["pay_periods"]),
        format_func=lambda p: p.label,
        key="pay_periods_input",
    )
    st.text_input("Edad", value=fv["age"], key="age_input")
    st.text_input("Número de hijos", value=fv["dependents"], key="dependents_input")
    st.selectbox(
        "Estado civil",
        status_options,
        index=status_options.index(fv["marital_status"]),
        format_func=lambda s: s.label,
        key="marital_status_input",
    )
    st.text_input("Grado de discapacidad", value=fv["disability"], key="disability_input")

    st.button("Calcular", type="primary", key="calculate", on_click=_on_calculate)


# ===============================
# RESULT VIEW
# ===============================
def render_result():
    result = st.session_state.result
    if not result.ok:
        st.error(result.message)
    else:
        st.subheader(result.message)
        if settings.show_breakdown and result.calc_input is not None:
            with st.expander("Detalle del cálculo", expanded=False):
                try:
                    st.dataframe(withholding_breakdown(result.calc_input), hide_index=True)
                except Exception as e:
                    st.error("Breakdown failed. Details below.")
                    st.exception(e)

    st.button("Volver", key="back", on_click=_on_back)


if View(st.session_state.view) is View.RESULT and st.session_state.result is not None:
    render_result()
else:
    render_form()
