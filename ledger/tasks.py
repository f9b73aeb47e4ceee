import logging

from celery import shared_task

from ledger.services import ReconciliationService

logger = logging.getLogger(__name__)


@shared_task
def reconcile_balances():
    """
    Periodic task: audit every balance against its transaction history.

    Runs via Celery Beat every LEDGER_RECONCILE_INTERVAL seconds. Mismatches
    are logged by ReconciliationService; nothing is corrected automatically.
    """
    audits = ReconciliationService.audit_all()
    mismatched = [audit.balance_id for audit in audits if not audit.consistent]

    if mismatched:
        logger.error(
            "Reconciliation found %d inconsistent balance(s): %s",
            len(mismatched),
            mismatched,
        )
    else:
        logger.info("Reconciliation checked %d balance(s), all consistent.", len(audits))

    return {"checked": len(audits), "mismatched": mismatched}
