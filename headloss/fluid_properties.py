"""
Fluid properties lookup for common HVAC fluids, plus kinematic viscosity.
"""

from .precision import round_significant

# lb/ft·s per centipoise
CP_TO_LB_FT_S = 0.00067197
# Density of the reference fluid (water), lb/ft³
WATER_DENSITY = 62.37

# Fluid properties at standard conditions (60°F)
FLUID_PROPERTIES = {
    'water': {
        'name': 'Water',
        'viscosity': 1.12,  # cP
        'specific_gravity': 1.0,
    },
    'glycol_30': {
        'name': '30% Ethylene Glycol',
        'viscosity': 2.6,  # cP
        'specific_gravity': 1.04,
    },
    'glycol_50': {
        'name': '50% Ethylene Glycol',
        'viscosity': 5.0,  # cP
        'specific_gravity': 1.07,
    },
}


def kinematic_viscosity(viscosity_cp, specific_gravity):
    """
    Kinematic viscosity in ft²/s.

    Formula: ν = (0.00067197 × μ[cP]) / (62.37 × SG)

    Args:
        viscosity_cp: Dynamic viscosity in centipoise
        specific_gravity: Fluid specific gravity relative to water

    Returns:
        Kinematic viscosity in ft²/s, 8 significant figures
    """
    result = (CP_TO_LB_FT_S * viscosity_cp) / (WATER_DENSITY * specific_gravity)
    return round_significant(result, 8)


def get_fluid_options():
    """Return list of available fluid types."""
    return list(FLUID_PROPERTIES.keys())


def get_fluid_properties(fluid_type):
    """Return viscosity (cP) and specific gravity for the specified fluid type."""
    if fluid_type not in FLUID_PROPERTIES:
        raise ValueError(f"Unknown fluid type: {fluid_type}")

    props = FLUID_PROPERTIES[fluid_type]
    return props['viscosity'], props['specific_gravity']


def get_fluid_name(fluid_type):
    """Return the display name for a fluid type."""
    return FLUID_PROPERTIES.get(fluid_type, {}).get('name', fluid_type)
