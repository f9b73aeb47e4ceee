from django.db import models


class BaseModel(models.Model):
    """
    Abstract base model providing creation audit fields.

    Every ledger table records when a row was created and by whom.
    Rows that are never edited after creation (transaction history)
    inherit from this directly.
    """

    created_on = models.DateTimeField(auto_now_add=True)
    created_by = models.CharField(max_length=100, default="system")

    class Meta:
        abstract = True
        ordering = ["-created_on"]


class AuditedModel(BaseModel):
    """Abstract base model for mutable rows: adds modification audit fields."""

    modified_on = models.DateTimeField(auto_now=True)
    modified_by = models.CharField(max_length=100, default="system")

    class Meta(BaseModel.Meta):
        abstract = True
