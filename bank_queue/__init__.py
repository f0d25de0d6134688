"""Bank queue simulation package."""

from .config import ConfigurationError, SimulationConfig, SIMULATION_MINUTES
from .core import Customer, Teller, CustomerQueue, TellerPool, WaitTimeLedger
from .system import BankSimulation, SimulationResult, run_day

__version__ = '1.0.0'

__all__ = [
    'ConfigurationError',
    'SimulationConfig',
    'SIMULATION_MINUTES',
    'Customer',
    'Teller',
    'CustomerQueue',
    'TellerPool',
    'WaitTimeLedger',
    'BankSimulation',
    'SimulationResult',
    'run_day'
]
