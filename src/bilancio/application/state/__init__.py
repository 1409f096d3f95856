from bilancio.application.state.transaction_list_state import TransactionListState

__all__ = ["TransactionListState"]
