"""
Darcy friction factor resolution.

The friction factor is read off a chart of Colebrook-White residuals rather
than solved for numerically. Every candidate factor between 0.0070 and 0.0918
is substituted into

    residual(f) = -2·√f·log10( ε/(3.7·D) + 2.51/(Re·√f) )

which equals 1 at the Colebrook solution and grows with f. The resolved factor
is the last candidate whose residual does not exceed FRICTION_FACTOR_KEY, the
same answer the spreadsheet's vertical lookup gave. Laminar flow uses 64/Re.
"""

import logging
import math
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from .precision import round_significant
from .pressure_drop import ROUGHNESS

logger = logging.getLogger(__name__)

FRICTION_FACTOR_KEY = 1.003
LAMINAR_LIMIT = 2000
# Returned when no candidate crosses the key; yields obviously wrong results downstream
UNRESOLVED = -1


def build_candidates(start: float = 0.007, stop: float = 0.0919,
                     step: float = 0.0001) -> Tuple[float, ...]:
    """
    Generate the candidate friction factors of the Darcy chart.

    Values step from ``start`` up to but excluding ``stop``, each rounded to
    3 significant figures. An integer step counter is used so the end point
    does not depend on accumulated float error.

    Returns:
        Ascending tuple of candidate factors
    """
    count = int(round((stop - start) / step))
    return tuple(round_significant(start + i * step, 3) for i in range(count))


CANDIDATES = build_candidates()


def darcy_value(candidate: float, diameter_feet: float, reynolds: float) -> float:
    """Colebrook-White residual for one candidate factor, 10 s.f."""
    sqrt_f = math.sqrt(candidate)
    end_value = 2.51 / (reynolds * sqrt_f)
    log_argument = (ROUGHNESS / (3.7 * diameter_feet)) + end_value
    return round_significant(-2 * sqrt_f * math.log10(log_argument), 10)


def create_darcy_chart(candidates: Sequence[float], diameter_feet: float,
                       reynolds: float) -> Mapping[float, float]:
    """
    Evaluate the residual of every candidate for one pipe and flow.

    Args:
        candidates: Candidate friction factors
        diameter_feet: Pipe diameter in ft
        reynolds: Reynolds number

    Returns:
        Read-only mapping of candidate → residual
    """
    chart = {v: darcy_value(v, diameter_feet, reynolds) for v in candidates}
    return MappingProxyType(chart)


def find_friction_factor(candidates: Sequence[float], darcy_chart: Mapping[float, float],
                         reynolds: float) -> float:
    """
    Resolve the Darcy friction factor.

    Laminar flow (Re < 2000) returns 64/Re to 3 s.f. without consulting the
    chart. Otherwise the candidates are scanned in order and the one before
    the first residual above FRICTION_FACTOR_KEY is returned; if the first
    candidate already exceeds the key it is returned itself.

    Returns:
        Friction factor, or UNRESOLVED (-1) when no residual exceeds the key
    """
    if reynolds < LAMINAR_LIMIT:
        logger.debug("Laminar flow (Re=%s), using 64/Re", reynolds)
        return round_significant(64 / reynolds, 3)

    last_value = candidates[0] if candidates else UNRESOLVED
    for v in candidates:
        if darcy_chart[v] > FRICTION_FACTOR_KEY:
            return last_value
        last_value = v

    logger.warning("No Darcy chart residual exceeds %s at Re=%s; friction factor unresolved",
                   FRICTION_FACTOR_KEY, reynolds)
    return UNRESOLVED


def resolve_friction_factor(diameter_feet: float, reynolds: float) -> Tuple[Mapping[float, float], float]:
    """Build the Darcy chart over CANDIDATES and resolve the friction factor from it."""
    chart = create_darcy_chart(CANDIDATES, diameter_feet, reynolds)
    return chart, find_friction_factor(CANDIDATES, chart, reynolds)
