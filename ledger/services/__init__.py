from ledger.services.balance import BalanceService
from ledger.services.reconciliation import BalanceAudit, ReconciliationService
from ledger.services.transaction import TransactionService

__all__ = [
    "BalanceService",
    "BalanceAudit",
    "ReconciliationService",
    "TransactionService",
]
