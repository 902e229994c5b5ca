from .precision import round_significant

# ft³/s per gal/min
GPM_TO_CFS = 0.002228


def flow_rate_cfs(flow_gpm):
    """
    Convert GPM to cubic feet per second.

    Formula: Q (ft³/s) = GPM × 0.002228

    Args:
        flow_gpm: Flow rate in GPM

    Returns:
        Flow rate in ft³/s, 4 significant figures
    """
    return round_significant(flow_gpm * GPM_TO_CFS, 4)


def shear_rate(flow_gpm, diameter_inches):
    """
    Wall shear rate estimate in 1/s.

    Formula: γ = 4.9 × GPM / (D/2)³ with D in inches
    """
    radius_cubed = (diameter_inches / 2) ** 3
    return round_significant((flow_gpm / radius_cubed) * 4.9, 5)
