"""Write-side use cases. Each invalidates the cache tags it affects."""

from bilancio.application.commands.description_commands import (
    DeleteDescriptionCommand,
    UpdateDescriptionCommand,
)
from bilancio.application.commands.login_command import LoginCommand
from bilancio.application.commands.logout_command import LogoutCommand
from bilancio.application.commands.register_command import RegisterCommand
from bilancio.application.commands.transaction_commands import (
    CreateTransactionCommand,
    DeleteTransactionCommand,
    DeleteTransactionGroupCommand,
    UpdateTransactionCommand,
)
from bilancio.application.commands.update_totals_command import UpdateTotalsCommand

__all__ = [
    "CreateTransactionCommand",
    "DeleteDescriptionCommand",
    "DeleteTransactionCommand",
    "DeleteTransactionGroupCommand",
    "LoginCommand",
    "LogoutCommand",
    "RegisterCommand",
    "UpdateDescriptionCommand",
    "UpdateTotalsCommand",
    "UpdateTransactionCommand",
]
