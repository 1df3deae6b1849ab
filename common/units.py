"""
Unit Registry for Shape Measurements.

The predicate engine itself works in dimensionless quantities: degrees in,
fractions of a unit sphere out. Whenever a result is scaled onto a physical
sphere it is tagged with units from a single `pint` registry, so that a
square kilometre can never be confused with a square mile downstream.

Example Usage
-------------
>>> from common.units import ureg, Q_
>>> Q_(1.0, 'km**2').to('m**2')
<Quantity(1000000.0, 'meter ** 2')>
"""

from functools import wraps
from typing import Callable, Union
import inspect
import warnings

import pint

# Create the global unit registry
ureg = pint.UnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


def validate_units(expected_units: dict[str, str]):
    """Decorator to validate units of function arguments and return values.

    Only arguments that already carry units are checked; bare numbers pass
    through untouched.

    Parameters
    ----------
    expected_units : dict[str, str]
        Mapping from argument names to expected unit strings.
        Use 'return' key for return value validation.

    Examples
    --------
    >>> @validate_units({'radius': 'm', 'return': 'm**2'})
    ... def disc_area(radius):
    ...     return 3.14159 * radius ** 2
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, expected_unit in expected_units.items():
                if param_name == 'return':
                    continue

                value = bound.arguments.get(param_name)
                if isinstance(value, pint.Quantity):
                    try:
                        value.to(expected_unit)
                    except pint.DimensionalityError as e:
                        raise ValueError(
                            f"Parameter '{param_name}' has incompatible units. "
                            f"Expected {expected_unit}, got {value.units}"
                        ) from e

            result = func(*args, **kwargs)

            if 'return' in expected_units and isinstance(result, pint.Quantity):
                try:
                    result.to(expected_units['return'])
                except pint.DimensionalityError as e:
                    raise ValueError(
                        f"Return value has incompatible units. "
                        f"Expected {expected_units['return']}, got {result.units}"
                    ) from e

            return result
        return wrapper
    return decorator


def ensure_quantity(value: Union[float, pint.Quantity], default_unit: str) -> pint.Quantity:
    """Ensure a value is a pint Quantity, applying default unit if necessary.

    Parameters
    ----------
    value : float or pint.Quantity
        The value to convert.
    default_unit : str
        The unit to apply if value is a bare number.

    Returns
    -------
    pint.Quantity
        The value with units.

    Warnings
    --------
    Issues a warning if a bare number is provided without units.
    """
    if isinstance(value, pint.Quantity):
        return value
    warnings.warn(
        f"Bare number {value} provided without units. "
        f"Assuming {default_unit}. Consider using explicit units.",
        UserWarning,
        stacklevel=3
    )
    return ureg.Quantity(value, default_unit)
