import math
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _Resource(BaseModel):
    # Backend objects carry more fields than the client reads; keep them.
    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Resources returned by the backend
# ---------------------------------------------------------------------------
class Account(_Resource):
    id: str
    balance: float
    user_id: Optional[str] = Field(None, alias="userId")
    alias: Optional[str] = None
    cvu: Optional[str] = None


class Transaction(_Resource):
    id: Optional[str] = None
    type: Optional[str] = None
    amount: float
    origin: Optional[str] = None
    destination: Optional[str] = None
    name: Optional[str] = None
    dated: Optional[datetime] = None
    account_id: Optional[str] = Field(None, alias="accountId")


class Card(_Resource):
    id: Optional[str] = None
    account_id: Optional[str] = Field(None, alias="accountId")
    card_number: Optional[str] = Field(None, alias="cardNumber")
    first_last_name: Optional[str] = Field(None, alias="firstLastName")
    expiration: Optional[str] = None


class User(_Resource):
    id: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    dni: Optional[str] = None
    phone: Optional[str] = None


class AuthToken(_Resource):
    token: str


# ---------------------------------------------------------------------------
# Request payloads / update DTOs
# ---------------------------------------------------------------------------
class AccountPatch(_Payload):
    balance: Optional[float] = None
    alias: Optional[str] = None

    @field_validator("balance")
    @classmethod
    def _finite_balance(cls, v):
        if v is not None and not math.isfinite(v):
            raise ValueError("balance must be a finite number")
        return v

    @model_validator(mode="after")
    def _not_empty(self):
        if self.balance is None and self.alias is None:
            raise ValueError("account patch must set at least one field")
        return self


class UserPatch(_Payload):
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    dni: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None

    @model_validator(mode="after")
    def _not_empty(self):
        if not self.model_dump(exclude_none=True):
            raise ValueError("user patch must set at least one field")
        return self


class UserCreate(_Payload):
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    dni: Optional[str] = None
    email: str
    password: str
    phone: Optional[str] = None


class LoginRequest(_Payload):
    email: str
    password: str


class CardCreate(_Payload):
    card_number: str = Field(..., alias="cardNumber", min_length=1)
    expiration: str
    first_last_name: str = Field(..., alias="firstLastName")
    cvc: Optional[str] = None


class DepositPayload(_Payload):
    account_id: int = Field(..., alias="accountId")
    card_number: str = Field(..., alias="cardNumber")
    amount: float


class TransferPayload(_Payload):
    type: str = "Transfer"
    amount: float
    origin: str
    destination: str
    name: Optional[str] = None
    dated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
