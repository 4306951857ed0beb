"""Primality test candidate module."""

from .CandidateBuilder import CandidateBuilder
from .abstract.ICandidateBuilder import ICandidateBuilder

__all__ = ["CandidateBuilder", "ICandidateBuilder"]
