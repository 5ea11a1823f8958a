"""
Error types raised by the HomeBank client.
"""

from typing import Any, Dict, Optional, Union

import httpx

DEFAULT_STATUS = "00"
DEFAULT_STATUS_TEXT = "Ocurrió un error"


class ApiError(Exception):
    """
    Normalized transport/HTTP failure.

    ``status`` is the HTTP status code, or ``"00"`` when no response was
    available (network failure, undecodable body).
    """

    err = True

    def __init__(
        self,
        status: Union[int, str] = DEFAULT_STATUS,
        status_text: str = DEFAULT_STATUS_TEXT,
    ):
        self.status = status or DEFAULT_STATUS
        self.status_text = status_text or DEFAULT_STATUS_TEXT
        super().__init__(f"{self.status} {self.status_text}")

    @classmethod
    def from_response(cls, response: Optional[httpx.Response]) -> "ApiError":
        if response is None:
            return cls()
        return cls(status=response.status_code, status_text=response.reason_phrase)

    def as_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "statusText": self.status_text, "err": self.err}

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, status_text={self.status_text!r})"


class UnreadableResponseError(ApiError):
    """
    The backend answered 2xx but its body could not be decoded or did not
    match the expected schema. The request itself may have taken effect.
    """


class ReconciliationError(Exception):
    """
    Raised in strict mode when a balance could not be reconciled.

    ``result`` is the failed ReconcileResult; ``transaction`` is set when the
    failure followed a successfully recorded transfer.
    """

    def __init__(self, result, transaction=None):
        self.result = result
        self.transaction = transaction
        super().__init__(
            f"balance of account {result.account_id} not reconciled: {result.error!r}"
        )
