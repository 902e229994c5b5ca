#!/usr/bin/env python3
"""
Gradio web app for the Pipe Head Loss Calculator.

Features:
- Flow, pipe and fluid inputs with nominal size and fluid presets
- Fitting counts converted to equivalent lengths
- Results, fitting and Darcy chart tables
- Plotly interactive charts

Run locally:
  python gradio_app.py

Run with a public share link:
  python gradio_app.py --share
"""
import argparse
import os
from typing import Tuple

import gradio as gr
import pandas as pd

from headloss.calculator import InputParameters, calculate
from headloss.fittings import get_fitting_options, get_fitting_name
from headloss.fluid_properties import get_fluid_options, get_fluid_properties, get_fluid_name
from headloss.inputs import validate_inputs
from headloss.pipe_lookup import get_nominal_sizes, get_pipe_id
from headloss.report import (
    darcy_chart_dataframe, fittings_dataframe, results_dataframe, summary_markdown,
)
from headloss.visualization import (
    darcy_chart_figure,
    fitting_lengths_figure,
    head_loss_curve_figure,
)

CUSTOM_SIZE = "Custom ID"
CUSTOM_FLUID = "Custom"


def compute_results(
    gpm: float,
    nominal_size: str,
    diameter_in: float,
    length_ft: float,
    fluid_name: str,
    viscosity_cp: float,
    spgr: float,
    vertical_rise_ft: float,
    *fitting_counts: float,
) -> Tuple:
    """Compute function wired to the Calculate button."""
    if nominal_size and nominal_size != CUSTOM_SIZE:
        diameter_in = get_pipe_id(nominal_size)

    fluids = {get_fluid_name(f): f for f in get_fluid_options()}
    if fluid_name in fluids:
        viscosity_cp, spgr = get_fluid_properties(fluids[fluid_name])

    counts = {
        kind: (count if count is not None else 0)
        for kind, count in zip(get_fitting_options(), fitting_counts)
    }
    params = InputParameters(
        gpm=gpm,
        diameter=diameter_in,
        length=length_ft,
        viscosity=viscosity_cp,
        specific_gravity=spgr,
        vertical_rise=vertical_rise_ft if vertical_rise_ft is not None else 0.0,
        **counts,
    )

    is_valid, error_msg = validate_inputs(params)
    if not is_valid:
        empty = pd.DataFrame()
        return f"### ❌ Input error\n- {error_msg}", empty, empty, empty, None, None, None

    result = calculate(params)

    return (
        summary_markdown(params, result),
        results_dataframe(result),
        fittings_dataframe(params, result),
        darcy_chart_dataframe(result),
        head_loss_curve_figure(params),
        fitting_lengths_figure(result),
        darcy_chart_figure(result),
    )


def build_interface():
    """Build the Blocks interface."""
    size_choices = [CUSTOM_SIZE] + get_nominal_sizes()
    fluid_choices = [get_fluid_name(f) for f in get_fluid_options()] + [CUSTOM_FLUID]

    with gr.Blocks(title="Pipe Head Loss Calculator", theme=gr.themes.Default()) as demo:
        gr.Markdown("# 🔧 Pipe Head Loss Calculator")
        gr.Markdown(
            "Darcy–Weisbach head loss and pressure drop for a single pipe run, "
            "with fittings converted to equivalent lengths."
        )

        with gr.Row():
            # Left column - Inputs
            with gr.Column(scale=1):
                gr.Markdown("## 📐 Pipe & Flow")

                gpm = gr.Number(label="Flow Rate (GPM)", value=100.0)
                nominal = gr.Dropdown(choices=size_choices, value=CUSTOM_SIZE,
                                      label="Nominal Size (Schedule 40)")
                diameter = gr.Number(label="Internal Diameter (in)", value=4.0)
                length = gr.Number(label="Straight Length (ft)", value=100.0)
                rise = gr.Number(label="Vertical Rise (ft)", value=0.0)

                gr.Markdown("## 💧 Fluid")

                fluid = gr.Dropdown(choices=fluid_choices, value=CUSTOM_FLUID, label="Fluid Type")
                viscosity = gr.Number(label="Viscosity (cP)", value=1.0)
                spgr = gr.Number(label="Specific Gravity", value=1.0)

                gr.Markdown("## 🔩 Fittings")

                fitting_inputs = [
                    gr.Number(label=get_fitting_name(kind), value=0, minimum=0)
                    for kind in get_fitting_options()
                ]

                run_btn = gr.Button("🚀 Calculate", variant="primary", size="lg")

            # Right column - Outputs
            with gr.Column(scale=2):
                summary = gr.Markdown()

                with gr.Row():
                    with gr.Column():
                        results_table = gr.Dataframe(label="Results", interactive=False)
                    with gr.Column():
                        fittings_table = gr.Dataframe(label="Fittings", interactive=False)

                gr.Markdown("## 📊 Interactive Charts")

                with gr.Row():
                    curve_chart = gr.Plot(label="Head Loss vs Flow Rate")
                    fittings_chart = gr.Plot(label="Fitting Equivalent Lengths")

                darcy_chart = gr.Plot(label="Darcy Chart")
                with gr.Accordion("Darcy Chart Values", open=False):
                    chart_table = gr.Dataframe(interactive=False)

        # Event handlers
        def on_nominal_change(size):
            if size == CUSTOM_SIZE:
                return gr.update(interactive=True)
            return gr.update(value=get_pipe_id(size), interactive=False)

        def on_fluid_change(name):
            fluids = {get_fluid_name(f): f for f in get_fluid_options()}
            if name not in fluids:
                return gr.update(interactive=True), gr.update(interactive=True)
            visc, sg = get_fluid_properties(fluids[name])
            return gr.update(value=visc, interactive=False), gr.update(value=sg, interactive=False)

        nominal.change(fn=on_nominal_change, inputs=[nominal], outputs=[diameter])
        fluid.change(fn=on_fluid_change, inputs=[fluid], outputs=[viscosity, spgr])

        run_btn.click(
            fn=compute_results,
            inputs=[gpm, nominal, diameter, length, fluid, viscosity, spgr, rise, *fitting_inputs],
            outputs=[
                summary, results_table, fittings_table, chart_table,
                curve_chart, fittings_chart, darcy_chart
            ],
        )

    return demo


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Pipe Head Loss Calculator")
    parser.add_argument("--share", action="store_true", help="Create a public share link")
    args = parser.parse_args()

    port = int(os.getenv("PORT", "7860"))
    print(f"🚀 Starting Pipe Head Loss Calculator on port {port}")
    build_interface().launch(server_name="0.0.0.0", server_port=port, share=args.share)
