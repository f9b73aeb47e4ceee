from django.core.management.base import BaseCommand

from ledger.services import ReconciliationService


class Command(BaseCommand):
    help = "Audits every balance against its transaction history"

    def handle(self, *args, **options):
        audits = ReconciliationService.audit_all()
        mismatched = [audit for audit in audits if not audit.consistent]

        for audit in mismatched:
            self.stdout.write(
                self.style.ERROR(
                    f"Balance {audit.balance_id} (user {audit.user_id}): "
                    f"value={audit.balance_value} ledger_total={audit.ledger_total} "
                    f"last_balance_after={audit.last_balance_after} "
                    f"inconsistent_entries={audit.inconsistent_entries}"
                )
            )

        if mismatched:
            self.stdout.write(
                self.style.WARNING(f"{len(mismatched)} of {len(audits)} balance(s) inconsistent.")
            )
        else:
            self.stdout.write(self.style.SUCCESS(f"{len(audits)} balance(s) consistent."))
