from django.contrib import admin

from ledger.models import Balance, Banner, Service, TransactionHistory


class ReadOnlyAdminMixin:
    """
    Mixin that makes an admin model completely read-only.

    Balances and history may only change through TransactionService, so the
    admin can browse them but never add, edit, or delete rows.
    """

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Balance)
class BalanceAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ("id", "user", "balance_value", "created_on", "modified_on")
    search_fields = ("user__email",)
    readonly_fields = (
        "user",
        "balance_value",
        "created_on",
        "created_by",
        "modified_on",
        "modified_by",
    )


@admin.register(TransactionHistory)
class TransactionHistoryAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = (
        "invoice_number",
        "balance",
        "transaction_type",
        "amount",
        "balance_before",
        "balance_after",
        "description",
        "created_on",
    )
    list_filter = ("transaction_type",)
    search_fields = ("invoice_number", "balance__user__email")
    readonly_fields = (
        "balance",
        "invoice_number",
        "amount",
        "balance_before",
        "balance_after",
        "transaction_type",
        "description",
        "created_on",
        "created_by",
    )


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ("service_code", "service_name", "service_tariff", "modified_on")
    search_fields = ("service_code", "service_name")


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ("banner_name", "description", "modified_on")
    search_fields = ("banner_name",)
