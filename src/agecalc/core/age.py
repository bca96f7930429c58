"""
Age Calculation.

This module holds the only piece of functional logic in the project: turning a
birth year into an age by subtracting it from the current calendar year.

It is a pure, stateless utility. The "current year" is read from the system
clock at call time unless the caller pins a reference date, which keeps the
function trivially testable.
"""

import logging
from datetime import date
from typing import Optional

from .models import AgeResult

age_logger = logging.getLogger(__name__)


def current_age_for_birth_year(birth_year: int, today: Optional[date] = None) -> int:
    """
    Returns the age of a person born in `birth_year`.

    Args:
        birth_year: The calendar year of birth. Any integer is accepted; a year
            in the future simply yields a negative age.
        today: The date to treat as "now". Defaults to `date.today()`.

    Returns:
        The current calendar year minus `birth_year`.
    """
    reference = today if today is not None else date.today()
    age = reference.year - birth_year
    age_logger.debug(f"Computed age {age} for birth year {birth_year} (reference year {reference.year})")
    return age


def calculate_age(birth_year: int, today: Optional[date] = None) -> AgeResult:
    """Computes the age and wraps it with the inputs it was derived from."""
    reference = today if today is not None else date.today()
    return AgeResult(
        birth_year=birth_year,
        reference_year=reference.year,
        age=current_age_for_birth_year(birth_year, reference),
    )
