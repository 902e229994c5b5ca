"""
Pressure-drop calculations (Darcy–Weisbach), Imperial units.
"""

from .precision import round_significant, round_fixed

ROUGHNESS = 0.000015  # ft, drawn tubing
GC = 32.17  # ft/s²
FT_HEAD_PER_PSI = 2.31


def reynolds_number(diameter_feet, velocity, kinematic_viscosity):
    """Reynolds number from D (ft), V (ft/s) and ν (ft²/s), 4 s.f."""
    return round_significant((diameter_feet * velocity) / kinematic_viscosity, 4)


def relative_roughness(diameter_feet):
    """ε/D rounded to 4 decimal places."""
    return round_fixed(ROUGHNESS / diameter_feet, 4)


def head_loss(friction_factor, total_length, velocity, diameter_feet, vertical_rise):
    """
    Returns head loss (ft) over the total equivalent length plus the static rise.

    h = f·L·V² / (2·D·g) + Δz, 2 significant figures
    """
    numerator = friction_factor * total_length * velocity ** 2
    denominator = 2 * diameter_feet * GC
    return round_significant(numerator / denominator + vertical_rise, 2)


def pressure_drop(head_loss_ft, specific_gravity):
    """Convert head loss (ft) to pressure drop (psi), 2 s.f."""
    return round_significant((head_loss_ft / FT_HEAD_PER_PSI) * specific_gravity, 2)
