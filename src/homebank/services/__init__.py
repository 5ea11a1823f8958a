"""
homebank.services

Client-side balance operations:
- reconciler.py: BalanceReconciler strategy + read-modify-write placeholder
- operations.py: deposit_money / create_transfer_activity orchestrators
"""

from .operations import TransferResult, create_transfer_activity, deposit_money  # noqa: F401
from .reconciler import (  # noqa: F401
    BalanceReconciler,
    ReadModifyWriteReconciler,
    ReconcileResult,
    SettlementStatus,
)
