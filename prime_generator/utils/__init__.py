"""Utility modules for the prime generator."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables"]
