"""Core components of the bank queue."""

from .base import Customer, Teller
from .queue import CustomerQueue
from .pool import TellerPool
from .ledger import WaitTimeLedger, INITIAL_LEDGER_CAPACITY

__all__ = [
    'Customer',
    'Teller',
    'CustomerQueue',
    'TellerPool',
    'WaitTimeLedger',
    'INITIAL_LEDGER_CAPACITY'
]
