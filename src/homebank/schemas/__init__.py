"""
Schemas for the HomeBank API
"""

from .models import (  # noqa: F401
    Account,
    AccountPatch,
    AuthToken,
    Card,
    CardCreate,
    DepositPayload,
    LoginRequest,
    Transaction,
    TransferPayload,
    User,
    UserCreate,
    UserPatch,
)
