from rest_framework import serializers

from ledger.models import MAX_BALANCE_VALUE, TransactionHistory


class PaymentSerializer(serializers.Serializer):
    """Validates payment requests."""

    service_code = serializers.CharField(max_length=50)


class HistoryQuerySerializer(serializers.Serializer):
    """Optional pagination parameters for the history listing."""

    limit = serializers.IntegerField(min_value=0, max_value=MAX_BALANCE_VALUE, required=False)
    offset = serializers.IntegerField(min_value=0, max_value=MAX_BALANCE_VALUE, required=False)

    def validate(self, attrs):
        if attrs.get("limit", 0) + attrs.get("offset", 0) > MAX_BALANCE_VALUE:
            raise serializers.ValidationError("limit + offset is out of range.")
        return attrs


class PaymentReceiptSerializer(serializers.ModelSerializer):
    """Read-only serializer for a completed payment."""

    service_code = serializers.SerializerMethodField()
    service_name = serializers.CharField(source="description", read_only=True)
    total_amount = serializers.IntegerField(source="amount", read_only=True)

    class Meta:
        model = TransactionHistory
        fields = (
            "invoice_number",
            "service_code",
            "service_name",
            "transaction_type",
            "total_amount",
            "created_on",
        )
        read_only_fields = fields

    def get_service_code(self, obj):
        return self.context.get("service_code")


class TransactionHistorySerializer(serializers.ModelSerializer):
    """Read-only serializer for history listings."""

    total_amount = serializers.IntegerField(source="amount", read_only=True)

    class Meta:
        model = TransactionHistory
        fields = (
            "invoice_number",
            "transaction_type",
            "description",
            "total_amount",
            "created_on",
        )
        read_only_fields = fields
