"""
Result Data Models.

This module defines the Pydantic model returned by the age calculation. It
gives the CLI (and any other caller) a structured, JSON-serialisable record of
what was computed and against which year.
"""

from pydantic import BaseModel


class AgeResult(BaseModel):
    """The outcome of a single age calculation."""
    birth_year: int
    reference_year: int
    age: int
