"""
Tabular presentation of calculation results.

Builds pandas DataFrames and a Markdown summary for the CLI and web front
ends. Nothing here changes a value; numbers are shown as calculated.
"""

import pandas as pd

from .calculator import CalculationResult, InputParameters
from .fittings import FITTINGS
from .friction import FRICTION_FACTOR_KEY, LAMINAR_LIMIT
from .pipe_lookup import PIPE_SCHEDULE, get_nominal_pipe_size

# (field, label, units) in display order
RESULT_FIELDS = [
    ('head_loss', 'Head Loss', 'ft'),
    ('pressure_drop', 'Pressure Drop', 'psi'),
    ('total_length', 'Total Length', 'ft'),
    ('kinematic_viscosity', 'Kinematic Viscosity', 'ft²/s'),
    ('diameter_in_feet', 'Diameter', 'ft'),
    ('flow_area', 'Flow Area', 'ft²'),
    ('flow_rate', 'Flow Rate', 'ft³/s'),
    ('velocity', 'Velocity', 'ft/s'),
    ('shear_rate', 'Shear Rate', '1/s'),
    ('reynolds_number', 'Reynolds Number', ''),
    ('roughness', 'Roughness', 'ft'),
    ('gc', 'Gravitational Constant', 'ft/s²'),
    ('e_over_d', 'Relative Roughness (ε/D)', ''),
    ('friction_factor', 'Friction Factor', ''),
    ('total_fitting_length', 'Total Fitting Length', 'ft'),
]

HIGH_VELOCITY_FPS = 10


def results_dataframe(result: CalculationResult) -> pd.DataFrame:
    """
    Create a Parameter/Value/Units table of the scalar results.

    Args:
        result: Completed calculation

    Returns:
        DataFrame with columns ['Parameter', 'Value', 'Units']
    """
    rows = [
        {'Parameter': label, 'Value': getattr(result, name), 'Units': units}
        for name, label, units in RESULT_FIELDS
    ]
    return pd.DataFrame(rows, columns=['Parameter', 'Value', 'Units'])


def fittings_dataframe(params: InputParameters, result: CalculationResult) -> pd.DataFrame:
    """Quantity, coefficient and equivalent length of each fitting kind."""
    counts = params.fitting_counts()
    lengths = result.fitting_lengths()

    df = pd.DataFrame({
        'Fitting': [spec['name'] for spec in FITTINGS.values()],
        'Quantity': [counts[kind] for kind in FITTINGS],
        'Coefficient': [spec['coefficient'] for spec in FITTINGS.values()],
        'Equivalent Length (ft)': [lengths[kind] for kind in FITTINGS],
    })
    return df


def darcy_chart_dataframe(result: CalculationResult) -> pd.DataFrame:
    """Candidate friction factors with their residuals, ascending."""
    if not result.darcy_chart:
        return pd.DataFrame(columns=['Friction Factor', 'Residual', 'Exceeds Key'])

    df = pd.DataFrame(
        sorted(result.darcy_chart.items()),
        columns=['Friction Factor', 'Residual'],
    )
    df['Exceeds Key'] = df['Residual'] > FRICTION_FACTOR_KEY
    return df


def collect_warnings(result: CalculationResult):
    """Return a list of warning strings for results that need attention."""
    warnings = []
    if not result.friction_resolved:
        warnings.append(
            "⚠️ Friction factor could not be resolved from the Darcy chart; "
            "head loss and pressure drop are not meaningful"
        )
    if result.velocity > HIGH_VELOCITY_FPS:
        warnings.append(f"⚠️ Velocity {result.velocity} ft/s exceeds {HIGH_VELOCITY_FPS} ft/s")
    return warnings


def summary_markdown(params: InputParameters, result: CalculationResult) -> str:
    regime = "Laminar" if result.reynolds_number < LAMINAR_LIMIT else "Turbulent"
    parts = [
        "### Analysis Summary",
        f"- **Flow**: {params.gpm:,} GPM through {params.diameter} in ID pipe",
        f"- **Head Loss**: {result.head_loss} ft",
        f"- **Pressure Drop**: {result.pressure_drop} psi",
        f"- **Total Length**: {result.total_length:,.0f} ft "
        f"({params.length} ft straight + {result.total_fitting_length:.4g} ft fittings)",
        f"- **Velocity**: {result.velocity} ft/s",
        f"- **Reynolds Number**: {result.reynolds_number:,.0f} ({regime})",
        f"- **Friction Factor**: {result.friction_factor}",
    ]

    if params.diameter <= max(PIPE_SCHEDULE.values()):
        size = get_nominal_pipe_size(params.diameter)
        parts.insert(2, f"- **Schedule 40 Size**: {size} (smallest with ID ≥ {params.diameter} in)")

    warnings = collect_warnings(result)
    if warnings:
        parts.append("\n### ⚠️ Warnings")
        for warning in warnings:
            parts.append(f"- {warning}")

    return "\n".join(parts)
