from django.db import models

from ledger.models.base import AuditedModel


class Service(AuditedModel):
    """A payable service in the catalog. Read-only from the ledger's side."""

    service_code = models.CharField(max_length=50, unique=True)
    service_name = models.CharField(max_length=100)
    service_icon = models.URLField(blank=True)
    service_tariff = models.PositiveBigIntegerField()

    class Meta(AuditedModel.Meta):
        ordering = ["service_code"]

    def __str__(self):
        return f"{self.service_code} ({self.service_name}, tariff={self.service_tariff})"


class Banner(AuditedModel):
    banner_name = models.CharField(max_length=100)
    banner_image = models.URLField(blank=True)
    description = models.CharField(max_length=255, blank=True)

    class Meta(AuditedModel.Meta):
        ordering = ["id"]

    def __str__(self):
        return self.banner_name
