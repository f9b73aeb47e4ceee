from rest_framework import serializers

from ledger.models import Banner, Service


class ServiceSerializer(serializers.ModelSerializer):
    class Meta:
        model = Service
        fields = ("service_code", "service_name", "service_icon", "service_tariff")
        read_only_fields = fields


class BannerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Banner
        fields = ("banner_name", "banner_image", "description")
        read_only_fields = fields
