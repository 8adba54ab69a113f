import uuid
from decimal import Decimal

import django.core.validators
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
            name="Proposal",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
                ("client", models.CharField(max_length=255, verbose_name="cliente")),
                (
                    "monthly_value",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=14,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                        verbose_name="valor mensal",
                    ),
                ),
                (
                    "months",
                    models.PositiveIntegerField(
                        default=12,
                        validators=[django.core.validators.MinValueValidator(1)],
                        verbose_name="meses",
                    ),
                ),
                (
                    "total_value",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        help_text="Calculado como valor mensal x meses quando não informado.",
                        max_digits=16,
                        verbose_name="valor total",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PROPOSAL", "Proposta"),
                            ("NEGOTIATION", "Negociação"),
                            ("WON", "Fechado"),
                            ("LOST", "Perdido"),
                        ],
                        db_index=True,
                        default="PROPOSAL",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                ("closing_date", models.DateField(blank=True, db_index=True, null=True, verbose_name="data de fechamento")),
                ("lost_date", models.DateField(blank=True, null=True, verbose_name="data da perda")),
                ("lost_reason", models.CharField(blank=True, default="", max_length=255, verbose_name="motivo da perda")),
                (
                    "closer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="proposals_as_closer",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="closer",
                    ),
                ),
                (
                    "sdr",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="proposals_as_sdr",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="SDR",
                    ),
                ),
            ],
            options={
                "verbose_name": "proposta",
                "verbose_name_plural": "propostas",
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddIndex(
            model_name="proposal",
            index=models.Index(fields=["status", "closing_date"], name="proposal_status_closing_idx"),
        ),
    ]
