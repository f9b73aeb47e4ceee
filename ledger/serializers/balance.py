from rest_framework import serializers


class BalanceSerializer(serializers.Serializer):
    balance = serializers.IntegerField(read_only=True)
