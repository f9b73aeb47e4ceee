import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Banner",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_on", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.CharField(default="system", max_length=100)),
                ("modified_on", models.DateTimeField(auto_now=True)),
                ("modified_by", models.CharField(default="system", max_length=100)),
                ("banner_name", models.CharField(max_length=100)),
                ("banner_image", models.URLField(blank=True)),
                ("description", models.CharField(blank=True, max_length=255)),
            ],
            options={
                "ordering": ["id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Service",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_on", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.CharField(default="system", max_length=100)),
                ("modified_on", models.DateTimeField(auto_now=True)),
                ("modified_by", models.CharField(default="system", max_length=100)),
                ("service_code", models.CharField(max_length=50, unique=True)),
                ("service_name", models.CharField(max_length=100)),
                ("service_icon", models.URLField(blank=True)),
                ("service_tariff", models.PositiveBigIntegerField()),
            ],
            options={
                "ordering": ["service_code"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Balance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_on", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.CharField(default="system", max_length=100)),
                ("modified_on", models.DateTimeField(auto_now=True)),
                ("modified_by", models.CharField(default="system", max_length=100)),
                ("balance_value", models.BigIntegerField(default=0)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="balance", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_on"],
                "abstract": False,
                "constraints": [
                    models.CheckConstraint(condition=models.Q(balance_value__gte=0), name="balance_value_non_negative"),
                ],
            },
        ),
        migrations.CreateModel(
            name="TransactionHistory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_on", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.CharField(default="system", max_length=100)),
                ("invoice_number", models.CharField(max_length=40, unique=True)),
                ("amount", models.BigIntegerField()),
                ("balance_before", models.BigIntegerField()),
                ("balance_after", models.BigIntegerField()),
                ("transaction_type", models.CharField(choices=[("TOPUP", "Top Up"), ("PAYMENT", "Payment")], max_length=10)),
                ("description", models.CharField(blank=True, max_length=255)),
                ("balance", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="history", to="ledger.balance")),
            ],
            options={
                "verbose_name_plural": "transaction history",
                "ordering": ["-created_on", "-id"],
                "abstract": False,
                "constraints": [
                    models.CheckConstraint(condition=models.Q(amount__gt=0), name="history_amount_positive"),
                ],
                "indexes": [
                    models.Index(fields=["balance", "created_on"], name="idx_history_balance_created"),
                ],
            },
        ),
    ]
