"""
Single-pipe hydraulic calculation.

Takes the fourteen user inputs (flow, geometry, fluid, rise and fitting
counts) and derives every reported quantity in dependency order:

    geometry/flow → Reynolds number → Darcy chart → friction factor
    → fitting equivalent lengths → total length → head loss → pressure drop

Nothing here validates physical inputs; callers check them first with
``headloss.inputs.validate_inputs``.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping

from .flow import flow_rate_cfs, shear_rate
from .fluid_properties import kinematic_viscosity
from .fittings import fitting_lengths, total_fitting_length
from .friction import resolve_friction_factor
from .precision import round_fixed
from .pressure_drop import (
    GC, ROUGHNESS, head_loss, pressure_drop, relative_roughness, reynolds_number,
)
from .velocity import diameter_in_feet, flow_area, velocity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputParameters:
    """User inputs for one calculation."""
    gpm: float  # gal/min
    diameter: float  # in, internal
    length: float  # ft of straight pipe
    viscosity: float  # cP
    specific_gravity: float
    vertical_rise: float = 0.0  # ft
    nineties: float = 0
    fortyfives: float = 0
    tee_branch: float = 0
    tee_line: float = 0
    globe: float = 0
    gate: float = 0
    swing: float = 0
    angle: float = 0

    def fitting_counts(self) -> Dict[str, float]:
        """Fitting kind → quantity."""
        return {
            'nineties': self.nineties,
            'fortyfives': self.fortyfives,
            'tee_branch': self.tee_branch,
            'tee_line': self.tee_line,
            'globe': self.globe,
            'gate': self.gate,
            'swing': self.swing,
            'angle': self.angle,
        }


@dataclass(frozen=True)
class CalculationResult:
    """Every derived quantity of one calculation run."""
    kinematic_viscosity: float  # ft²/s
    diameter_in_feet: float
    flow_area: float  # ft²
    flow_rate: float  # ft³/s
    velocity: float  # ft/s
    shear_rate: float  # 1/s
    e_over_d: float
    reynolds_number: float
    friction_factor: float
    nineties: float  # equivalent lengths, ft
    fortyfives: float
    tee_branches: float
    tee_lines: float
    globes: float
    gates: float
    swings: float
    angles: float
    total_fitting_length: float  # ft
    total_length: float  # ft
    head_loss: float  # ft
    pressure_drop: float  # psi
    darcy_chart: Mapping[float, float] = field(default_factory=dict, repr=False)
    roughness: float = ROUGHNESS
    gc: float = GC

    @property
    def friction_resolved(self) -> bool:
        return self.friction_factor > 0

    def fitting_lengths(self) -> Dict[str, float]:
        """Fitting kind → equivalent length (ft), keyed like InputParameters."""
        return {
            'nineties': self.nineties,
            'fortyfives': self.fortyfives,
            'tee_branch': self.tee_branches,
            'tee_line': self.tee_lines,
            'globe': self.globes,
            'gate': self.gates,
            'swing': self.swings,
            'angle': self.angles,
        }

    def to_dict(self, include_chart: bool = False) -> Dict[str, Any]:
        """Plain dict of the scalar fields, optionally with the chart keyed by str."""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != 'darcy_chart'}
        if include_chart:
            data['darcy_chart'] = {str(k): v for k, v in self.darcy_chart.items()}
        return data


def calculate(params: InputParameters) -> CalculationResult:
    """
    Run the full calculation for one pipe at one operating point.

    Args:
        params: User inputs

    Returns:
        CalculationResult holding every derived value and the Darcy chart
    """
    kin_visc = kinematic_viscosity(params.viscosity, params.specific_gravity)
    d_ft = diameter_in_feet(params.diameter)
    area = flow_area(d_ft)
    flow = flow_rate_cfs(params.gpm)
    vel = velocity(flow, area)
    shear = shear_rate(params.gpm, params.diameter)
    e_over_d = relative_roughness(d_ft)

    re = reynolds_number(d_ft, vel, kin_visc)
    darcy_chart, f = resolve_friction_factor(d_ft, re)
    logger.debug("Re=%s, friction factor=%s", re, f)

    # Fitting lengths need the friction factor and diameter in feet
    lengths = fitting_lengths(d_ft, f, params.fitting_counts())
    fitting_total = total_fitting_length(lengths)
    total_length = round_fixed(float(params.length) + fitting_total, 0)

    # These two are calculated last
    h_loss = head_loss(f, total_length, vel, d_ft, params.vertical_rise)
    dp = pressure_drop(h_loss, params.specific_gravity)

    return CalculationResult(
        kinematic_viscosity=kin_visc,
        diameter_in_feet=d_ft,
        flow_area=area,
        flow_rate=flow,
        velocity=vel,
        shear_rate=shear,
        e_over_d=e_over_d,
        reynolds_number=re,
        friction_factor=f,
        nineties=lengths['nineties'],
        fortyfives=lengths['fortyfives'],
        tee_branches=lengths['tee_branch'],
        tee_lines=lengths['tee_line'],
        globes=lengths['globe'],
        gates=lengths['gate'],
        swings=lengths['swing'],
        angles=lengths['angle'],
        total_fitting_length=fitting_total,
        total_length=total_length,
        head_loss=h_loss,
        pressure_drop=dp,
        darcy_chart=darcy_chart,
    )


def create_data(gpm, diameter, length, viscosity, spgr, vertical_rise,
                nineties, fortyfives, teebranch, teeline, globe, gate, swing, angle):
    """Positional form of ``calculate`` taking the fourteen inputs in form order."""
    params = InputParameters(
        gpm=gpm,
        diameter=diameter,
        length=length,
        viscosity=viscosity,
        specific_gravity=spgr,
        vertical_rise=vertical_rise,
        nineties=nineties,
        fortyfives=fortyfives,
        tee_branch=teebranch,
        tee_line=teeline,
        globe=globe,
        gate=gate,
        swing=swing,
        angle=angle,
    )
    return calculate(params)
