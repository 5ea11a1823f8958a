"""
homebank.clients

- transport.py: request descriptor + response classification (httpx)
- auth.py, users.py, accounts.py, cards.py, transactions.py: resource accessors
- bank_client.py: BankApiClient facade
"""

from .accounts import AccountsClient  # noqa: F401
from .auth import AuthClient  # noqa: F401
from .cards import CardsClient  # noqa: F401
from .transactions import TransactionsClient  # noqa: F401
from .transport import BankTransport, RequestOptions, build_request  # noqa: F401
from .users import UsersClient  # noqa: F401
from .bank_client import BankApiClient  # noqa: F401
