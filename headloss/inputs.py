import math
from typing import Tuple

from .calculator import InputParameters
from .fittings import get_fitting_options, get_fitting_name
from .fluid_properties import get_fluid_options, get_fluid_properties, get_fluid_name
from .pipe_lookup import PIPE_SCHEDULE, get_nominal_pipe_size, get_pipe_id


def validate_inputs(params: InputParameters) -> Tuple[bool, str]:
    """
    Validate user inputs before running a calculation.

    Args:
        params: Inputs to check

    Returns:
        Tuple of (is_valid, error_message)
    """
    values = {
        'Flow rate': params.gpm,
        'Diameter': params.diameter,
        'Length': params.length,
        'Viscosity': params.viscosity,
        'Specific gravity': params.specific_gravity,
        'Vertical rise': params.vertical_rise,
    }
    for kind, count in params.fitting_counts().items():
        values[get_fitting_name(kind)] = count

    for label, value in values.items():
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return False, f"{label} must be a number"
        if not math.isfinite(value):
            return False, f"{label} must be a finite number"

    # Zero flow gives Re = 0, which 64/Re cannot handle
    if params.gpm <= 0:
        return False, "Flow rate must be greater than zero"
    if params.diameter <= 0:
        return False, "Diameter must be greater than zero"
    if params.viscosity <= 0:
        return False, "Viscosity must be greater than zero"
    if params.specific_gravity <= 0:
        return False, "Specific gravity must be greater than zero"
    if params.length < 0:
        return False, "Length must be non-negative"

    negative = [get_fitting_name(k) for k, v in params.fitting_counts().items() if v < 0]
    if negative:
        return False, f"Fitting counts must be non-negative: {', '.join(negative)}"

    return True, ""


def _prompt_float(prompt, default=None, minimum=None):
    while True:
        raw = input(prompt).strip()
        if not raw and default is not None:
            return float(default)
        try:
            value = float(raw)
        except ValueError:
            print("Please enter a valid number.")
            continue
        if minimum is not None and value < minimum:
            print(f"Value must be at least {minimum}.")
            continue
        return value


def _prompt_diameter():
    while True:
        raw = input('Pipe internal diameter (in), or nominal size like 4" : ').strip()
        pipe_id = get_pipe_id(raw) or get_pipe_id(raw + '"')
        if pipe_id is not None:
            print(f"Using Schedule 40 ID {pipe_id} in")
            return pipe_id
        try:
            value = float(raw)
        except ValueError:
            print("Please enter a number or a standard nominal size.")
            continue
        if value <= 0:
            print("Diameter must be greater than zero.")
            continue
        if value <= max(PIPE_SCHEDULE.values()):
            print(f"Smallest Schedule 40 size that fits: {get_nominal_pipe_size(value)}")
        return value


def get_inputs() -> InputParameters:
    print("Enter Pipe Head Loss Calculator inputs (Imperial units):")
    gpm = _prompt_float("Flow rate (GPM): ", minimum=0)
    diameter = _prompt_diameter()
    length = _prompt_float("Straight pipe length (ft): ", minimum=0)

    # Fluid selection
    print("\nAvailable fluids:")
    fluid_options = get_fluid_options()
    for i, fluid_type in enumerate(fluid_options, 1):
        print(f"{i}. {get_fluid_name(fluid_type)}")
    print(f"{len(fluid_options) + 1}. Custom")

    while True:
        try:
            choice = input("Select fluid type [default 1]: ") or "1"
            fluid_idx = int(choice) - 1
            if 0 <= fluid_idx <= len(fluid_options):
                break
            print("Invalid selection. Please try again.")
        except ValueError:
            print("Please enter a valid number.")

    if fluid_idx < len(fluid_options):
        viscosity, spgr = get_fluid_properties(fluid_options[fluid_idx])
        print(f"Using {get_fluid_name(fluid_options[fluid_idx])} - Viscosity: {viscosity} cP, SG: {spgr}")
    else:
        viscosity = _prompt_float("Viscosity (cP): ", minimum=0)
        spgr = _prompt_float("Specific gravity [default 1.0]: ", default=1.0, minimum=0)

    vertical_rise = _prompt_float("Vertical rise (ft) [default 0]: ", default=0)

    print("\nFitting counts (press Enter for none):")
    counts = {
        kind: _prompt_float(f"{get_fitting_name(kind)}: ", default=0, minimum=0)
        for kind in get_fitting_options()
    }

    return InputParameters(
        gpm=gpm,
        diameter=diameter,
        length=length,
        viscosity=viscosity,
        specific_gravity=spgr,
        vertical_rise=vertical_rise,
        **counts,
    )
