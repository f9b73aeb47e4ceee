from rest_framework import serializers

from ledger.models import MAX_BALANCE_VALUE


class TopUpSerializer(serializers.Serializer):
    """Validates top-up requests."""

    top_up_amount = serializers.IntegerField(
        min_value=1,
        max_value=MAX_BALANCE_VALUE,
        error_messages={
            "invalid": "Amount must be a number greater than 0.",
            "min_value": "Amount must be a number greater than 0.",
            "max_value": "Amount exceeds the maximum balance.",
        },
    )
