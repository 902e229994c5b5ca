"""
Visualization module for head loss charts using Plotly.

- Darcy chart: Colebrook-White residual of each candidate friction factor
- Fitting equivalent lengths bar chart
- System curve: head loss vs flow rate for the current pipe
"""

from dataclasses import replace
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from .calculator import CalculationResult, InputParameters, calculate
from .fittings import FITTINGS
from .friction import FRICTION_FACTOR_KEY, LAMINAR_LIMIT


def darcy_chart_figure(result: CalculationResult) -> go.Figure:
    """
    Create residual vs candidate friction factor chart.

    Args:
        result: Completed calculation holding the Darcy chart

    Returns:
        Plotly Figure object
    """
    fig = go.Figure()

    if not result.darcy_chart:
        fig.update_layout(template='plotly_white', title='No Darcy Chart Available', height=400)
        return fig

    candidates, residuals = zip(*sorted(result.darcy_chart.items()))

    fig.add_trace(go.Scatter(
        x=candidates,
        y=residuals,
        mode='lines',
        name='Colebrook Residual',
        line=dict(color='blue', width=2),
        hovertemplate='f: %{x:.4f}<br>Residual: %{y:.6f}<extra></extra>'
    ))

    fig.add_hline(y=FRICTION_FACTOR_KEY, line_dash="dash", line_color="red",
                  annotation_text=f"Key ({FRICTION_FACTOR_KEY})", annotation_position="right")

    # Laminar factors come from 64/Re, not from the chart scan
    chart_resolved = result.friction_resolved and result.reynolds_number >= LAMINAR_LIMIT
    if chart_resolved and result.friction_factor in result.darcy_chart:
        fig.add_trace(go.Scatter(
            x=[result.friction_factor],
            y=[result.darcy_chart[result.friction_factor]],
            mode='markers+text',
            name='Resolved f',
            marker=dict(color='red', size=10),
            text=[f'f = {result.friction_factor}'],
            textposition='top left',
            hovertemplate='Resolved f: %{x:.4f}<extra></extra>'
        ))

    fig.update_layout(
        template='plotly_white',
        title=f'Darcy Chart<br>Re: {result.reynolds_number:,.0f}, D: {result.diameter_in_feet} ft',
        xaxis_title='Candidate Friction Factor',
        yaxis_title='Colebrook-White Residual',
        showlegend=True,
        height=500,
        xaxis=dict(gridcolor='lightgray'),
        yaxis=dict(gridcolor='lightgray')
    )

    return fig


def fitting_lengths_figure(result: CalculationResult) -> go.Figure:
    """Bar chart of equivalent length by fitting kind."""
    lengths = result.fitting_lengths()
    names = [spec['name'] for spec in FITTINGS.values()]
    values = [lengths[kind] for kind in FITTINGS]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=names,
        y=values,
        name='Equivalent Length',
        marker_color='lightblue',
        hovertemplate='%{x}<br>%{y:.1f} ft<extra></extra>'
    ))

    fig.update_layout(
        template='plotly_white',
        title=f'Fitting Equivalent Lengths<br>Total: {result.total_fitting_length:.4g} ft',
        xaxis_title='Fitting',
        yaxis_title='Equivalent Length (ft)',
        height=450
    )

    return fig


def head_loss_curve_figure(params: InputParameters, max_gpm: Optional[float] = None,
                           points: int = 25) -> go.Figure:
    """
    Create head loss vs flow rate (system curve) chart.

    Args:
        params: Inputs for the operating point; flow is varied, everything else held
        max_gpm: Upper end of the flow range (default 2× the operating flow)
        points: Number of flow rates to evaluate

    Returns:
        Plotly Figure object
    """
    if max_gpm is None:
        max_gpm = 2 * params.gpm

    flows = np.linspace(max_gpm / points, max_gpm, points)
    head_losses = [calculate(replace(params, gpm=float(q))).head_loss for q in flows]

    operating = calculate(params)

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=flows,
        y=head_losses,
        mode='lines+markers',
        name='System Curve',
        line=dict(color='blue', width=2),
        hovertemplate='Flow: %{x:,.0f} GPM<br>Head Loss: %{y} ft<extra></extra>'
    ))

    fig.add_trace(go.Scatter(
        x=[params.gpm],
        y=[operating.head_loss],
        mode='markers',
        name='Operating Point',
        marker=dict(color='red', size=12),
        hovertemplate='Flow: %{x:,.0f} GPM<br>Head Loss: %{y} ft<extra></extra>'
    ))

    fig.update_layout(
        template='plotly_white',
        title=f'Head Loss vs Flow Rate<br>{params.diameter} in ID, {params.length} ft straight run',
        xaxis_title='Flow Rate (GPM)',
        yaxis_title='Head Loss (ft)',
        showlegend=True,
        height=500,
        xaxis=dict(gridcolor='lightgray'),
        yaxis=dict(gridcolor='lightgray')
    )

    return fig
