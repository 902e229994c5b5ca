import math

from .precision import round_significant

PI = math.atan(1) * 4


def diameter_in_feet(diameter_inches):
    """Pipe internal diameter in ft (4 s.f.)."""
    return round_significant(diameter_inches / 12, 4)


def flow_area(diameter_feet):
    """Cross-sectional flow area in ft² (3 s.f.)."""
    return round_significant(PI * (diameter_feet / 2) ** 2, 3)


def velocity(flow_cfs, area_ft2):
    """Mean velocity in ft/s (3 s.f.)."""
    return round_significant(flow_cfs / area_ft2, 3)
