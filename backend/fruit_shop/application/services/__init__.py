from .identifiers import StampIdGenerator
from .account_directory import AccountDirectory
from .order_ledger import OrderLedger
from .order_progress import OrderProgressSimulator, ProgressSimulation

__all__ = [
    "StampIdGenerator",
    "AccountDirectory",
    "OrderLedger",
    "OrderProgressSimulator",
    "ProgressSimulation",
]
