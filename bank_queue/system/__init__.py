"""Simulation engine."""

from .bank_system import BankSimulation, SimulationResult, run_day

__all__ = ['BankSimulation', 'SimulationResult', 'run_day']
