"""Backend API contracts.

Pydantic models mirroring the JSON payloads exchanged with the finance
backend. Field names are snake_case in Python and camelCase on the wire.
"""

from bilancio_contracts.admin import AdminUser, GetUsersResponse
from bilancio_contracts.auth import (
    GoogleLoginRequest,
    LoginRequest,
    LoginResponse,
    RegistrationForm,
    RegistrationRequest,
    UserInfoResponse,
)
from bilancio_contracts.common import BillId, BillRef, CamelModel
from bilancio_contracts.contact import ContactRequest, ContactResponse
from bilancio_contracts.descriptions import (
    DescriptionPayload,
    DescriptionsResponse,
    UpdateDescriptionRequest,
)
from bilancio_contracts.totals import TotalPayload, TotalUpdateRequest
from bilancio_contracts.transactions import (
    AddTransactionRequest,
    DeleteTransactionItem,
    PaginatedTransactionsResponse,
    TransactionPayload,
    UpdateTransactionRequest,
)

__all__ = [
    # Common
    "BillId",
    "BillRef",
    "CamelModel",
    # Auth
    "GoogleLoginRequest",
    "LoginRequest",
    "LoginResponse",
    "RegistrationForm",
    "RegistrationRequest",
    "UserInfoResponse",
    # Transactions
    "AddTransactionRequest",
    "DeleteTransactionItem",
    "PaginatedTransactionsResponse",
    "TransactionPayload",
    "UpdateTransactionRequest",
    # Totals
    "TotalPayload",
    "TotalUpdateRequest",
    # Descriptions
    "DescriptionPayload",
    "DescriptionsResponse",
    "UpdateDescriptionRequest",
    # Admin
    "AdminUser",
    "GetUsersResponse",
    # Contact
    "ContactRequest",
    "ContactResponse",
]
