"""
Fitting resistance table and equivalent-length calculations.

Each fitting is converted into the length of straight pipe that would cause
the same friction loss, L_eq = K·D/f per fitting, using the resolved friction
factor of the run.
"""

from types import MappingProxyType
from typing import Dict, Mapping

from .precision import round_significant

# Fitting coefficients (unitless), in reporting order
FITTINGS = MappingProxyType({
    'nineties': {'name': '90° Elbow', 'coefficient': 0.21},
    'fortyfives': {'name': '45° Elbow', 'coefficient': 0.105},
    'tee_branch': {'name': 'Tee (Branch Flow)', 'coefficient': 1.14},
    'tee_line': {'name': 'Tee (Line Flow)', 'coefficient': 0.38},
    'globe': {'name': 'Globe Valve', 'coefficient': 6.5},
    'gate': {'name': 'Gate Valve', 'coefficient': 0.16},
    'swing': {'name': 'Swing Check Valve', 'coefficient': 1.9},
    'angle': {'name': 'Angle Valve', 'coefficient': 2.0},
})


def get_fitting_options():
    """Return list of fitting kinds in reporting order."""
    return list(FITTINGS.keys())


def get_fitting_name(kind):
    """Return the display name for a fitting kind."""
    return FITTINGS.get(kind, {}).get('name', kind)


def get_fitting_coefficient(kind):
    """Return the resistance coefficient for the specified fitting kind."""
    if kind not in FITTINGS:
        raise ValueError(f"Unknown fitting type: {kind}")
    return FITTINGS[kind]['coefficient']


def equivalent_length(coefficient, diameter_feet, friction_factor, quantity):
    """
    Equivalent straight length (ft) of ``quantity`` fittings, 4 s.f.

    Args:
        coefficient: Fitting coefficient K
        diameter_feet: Pipe diameter in ft
        friction_factor: Resolved Darcy friction factor
        quantity: Number of fittings (may be fractional)
    """
    return round_significant(coefficient * diameter_feet / friction_factor * quantity, 4)


def fitting_lengths(diameter_feet: float, friction_factor: float,
                    counts: Mapping[str, float]) -> Dict[str, float]:
    """
    Equivalent length of every fitting kind.

    Args:
        diameter_feet: Pipe diameter in ft
        friction_factor: Resolved Darcy friction factor
        counts: Fitting kind → quantity; missing kinds count as zero

    Returns:
        Dict of fitting kind → equivalent length (ft), in table order
    """
    return {
        kind: equivalent_length(spec['coefficient'], diameter_feet, friction_factor,
                                counts.get(kind, 0))
        for kind, spec in FITTINGS.items()
    }


def total_fitting_length(lengths: Mapping[str, float]) -> float:
    """Sum of the already rounded equivalent lengths."""
    return sum(lengths[kind] for kind in FITTINGS if kind in lengths)
