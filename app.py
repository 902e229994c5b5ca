#!/usr/bin/env python3
"""
Streamlit web application for the Pipe Head Loss Calculator.
Provides an interactive interface for head loss, pressure drop and fitting analysis.

Run locally:
  streamlit run app.py
"""

import streamlit as st

from headloss.calculator import InputParameters, calculate
from headloss.fittings import get_fitting_options, get_fitting_name
from headloss.fluid_properties import get_fluid_options, get_fluid_properties, get_fluid_name
from headloss.inputs import validate_inputs
from headloss.pipe_lookup import get_nominal_sizes, get_pipe_id
from headloss.report import (
    collect_warnings, darcy_chart_dataframe, fittings_dataframe, results_dataframe,
)
from headloss.visualization import (
    darcy_chart_figure, fitting_lengths_figure, head_loss_curve_figure,
)

# Page configuration
st.set_page_config(
    page_title="Pipe Head Loss Calculator",
    page_icon="🔧",
    layout="wide",
    initial_sidebar_state="expanded"
)


def main():
    """Main Streamlit application."""

    # Header
    st.title("🔧 Pipe Head Loss Calculator")
    st.markdown("**Darcy–Weisbach head loss and pressure drop for a single pipe run**")
    st.divider()

    # Sidebar for inputs
    with st.sidebar:
        st.header("⚙️ Pipe & Flow")

        gpm = st.number_input(
            "Flow Rate (GPM)",
            min_value=0.0,
            value=100.0,
            step=10.0,
            help="Volumetric flow through the pipe"
        )

        size_choice = st.selectbox(
            "Nominal Size (Schedule 40)",
            ["Custom ID"] + get_nominal_sizes(),
            index=0,
            help="Pick a standard size or enter the internal diameter"
        )
        if size_choice == "Custom ID":
            diameter = st.number_input("Internal Diameter (in)", min_value=0.0, value=4.0, step=0.125)
        else:
            diameter = get_pipe_id(size_choice)
            st.metric("Internal Diameter", f"{diameter} in")

        length = st.number_input("Straight Length (ft)", min_value=0.0, value=100.0, step=10.0)
        vertical_rise = st.number_input("Vertical Rise (ft)", value=0.0, step=1.0)

        # Fluid selection
        st.subheader("🌊 Fluid Properties")
        fluid_options = get_fluid_options()
        fluid_names = [get_fluid_name(fluid) for fluid in fluid_options] + ["Custom"]

        selected_fluid_name = st.selectbox("Fluid Type", fluid_names, index=0)

        if selected_fluid_name == "Custom":
            viscosity = st.number_input("Viscosity (cP)", min_value=0.0, value=1.0, step=0.1)
            spgr = st.number_input("Specific Gravity", min_value=0.0, value=1.0, step=0.01)
        else:
            selected_fluid = fluid_options[fluid_names.index(selected_fluid_name)]
            viscosity, spgr = get_fluid_properties(selected_fluid)
            col1, col2 = st.columns(2)
            with col1:
                st.metric("Viscosity", f"{viscosity} cP")
            with col2:
                st.metric("Specific Gravity", f"{spgr}")

        st.subheader("🔩 Fittings")
        counts = {
            kind: st.number_input(get_fitting_name(kind), min_value=0.0, value=0.0, step=1.0)
            for kind in get_fitting_options()
        }

        st.divider()
        run_calc = st.button("🚀 Calculate", type="primary", use_container_width=True)

    if not run_calc:
        st.info("Set the inputs in the sidebar and press Calculate.")
        return

    params = InputParameters(
        gpm=gpm,
        diameter=diameter,
        length=length,
        viscosity=viscosity,
        specific_gravity=spgr,
        vertical_rise=vertical_rise,
        **counts,
    )

    is_valid, error_msg = validate_inputs(params)
    if not is_valid:
        st.error(f"❌ {error_msg}")
        return

    result = calculate(params)

    for warning in collect_warnings(result):
        st.warning(warning)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Head Loss", f"{result.head_loss} ft")
    col2.metric("Pressure Drop", f"{result.pressure_drop} psi")
    col3.metric("Total Length", f"{result.total_length:,.0f} ft")
    col4.metric("Friction Factor", f"{result.friction_factor}")

    st.header("📋 Results")
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Calculated Values")
        results_df = results_dataframe(result)
        st.dataframe(results_df, use_container_width=True, hide_index=True)
        st.download_button(
            "Download results (CSV)",
            results_df.to_csv(index=False),
            file_name="head_loss_results.csv",
            mime="text/csv"
        )
    with col2:
        st.subheader("Fittings")
        st.dataframe(fittings_dataframe(params, result), use_container_width=True, hide_index=True)

    st.header("📊 Charts")
    tab1, tab2, tab3 = st.tabs(["Head Loss vs Flow", "Fitting Lengths", "Darcy Chart"])
    with tab1:
        st.plotly_chart(head_loss_curve_figure(params), use_container_width=True)
    with tab2:
        st.plotly_chart(fitting_lengths_figure(result), use_container_width=True)
    with tab3:
        st.plotly_chart(darcy_chart_figure(result), use_container_width=True)
        with st.expander("Darcy chart values"):
            st.dataframe(darcy_chart_dataframe(result), use_container_width=True, hide_index=True)


if __name__ == "__main__":
    main()
