"""Public interface for the ``ach_transactions`` package.

Re-exports the driver functions, the builder and the transaction models. The
NACHA codec itself lives in :mod:`ach_transactions.nacha`.
"""

from .api import (
    AchReadError,
    charge_back_transactions,
    dump_ach,
    read_ach,
    run_demo,
    send_transactions,
)
from .builder import AchBuildError, build_ach
from .models import (
    ACHData,
    BaseTransaction,
    BatchSummary,
    ChargebackTransaction,
    CreditTransaction,
    DebitTransaction,
    FileSummary,
    Originator,
    Transaction,
    Transactions,
)

__version__ = "0.1.0"

__all__ = [
    # Drivers
    "send_transactions",
    "charge_back_transactions",
    "read_ach",
    "dump_ach",
    "run_demo",
    # Builder
    "build_ach",
    "AchBuildError",
    "AchReadError",
    # Models / types
    "ACHData",
    "Originator",
    "Transaction",
    "Transactions",
    "BaseTransaction",
    "CreditTransaction",
    "DebitTransaction",
    "ChargebackTransaction",
    "FileSummary",
    "BatchSummary",
]
