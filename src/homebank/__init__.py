"""
HomeBank client
Async data-access layer for the HomeBank personal-banking API.
"""

from .clients import BankApiClient, BankTransport  # noqa: F401
from .config import Settings, get_settings  # noqa: F401
from .errors import ApiError, ReconciliationError, UnreadableResponseError  # noqa: F401
from .logging_config import setup_logging  # noqa: F401
from .services import (  # noqa: F401
    ReconcileResult,
    SettlementStatus,
    TransferResult,
    create_transfer_activity,
    deposit_money,
)

__version__ = "0.1.0"
