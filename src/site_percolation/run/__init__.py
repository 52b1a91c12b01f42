"""Scenario definitions for driving a percolation grid."""

from .scenario import ScenarioConfig, reference_scenario

__all__ = ['ScenarioConfig', 'reference_scenario']
