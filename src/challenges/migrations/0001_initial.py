import uuid
from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Challenge",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
                ("title", models.CharField(max_length=200, verbose_name="título")),
                ("description", models.TextField(blank=True, default="", verbose_name="descrição")),
                ("start_date", models.DateField(verbose_name="início")),
                ("end_date", models.DateField(verbose_name="fim")),
                ("prize", models.CharField(blank=True, default="", max_length=255, verbose_name="prêmio")),
                (
                    "target_type",
                    models.CharField(
                        choices=[
                            ("points", "Pontos"),
                            ("sales", "Vendas"),
                            ("mql", "MQL"),
                            ("visitas_agendadas", "Visitas agendadas"),
                            ("contratos_assinados", "Contratos assinados"),
                            ("pontos_educacao", "Pontos de educação"),
                        ],
                        default="points",
                        max_length=30,
                        verbose_name="tipo de meta",
                    ),
                ),
                (
                    "target_value",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=14,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.01"))],
                        verbose_name="meta",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Ativo"), ("completed", "Concluído"), ("expired", "Expirado")],
                        db_index=True,
                        default="active",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                ("participant_ids", models.JSONField(blank=True, default=list, verbose_name="participantes")),
                ("winner_ids", models.JSONField(blank=True, default=list, verbose_name="vencedores")),
                ("completion_date", models.DateTimeField(blank=True, null=True, verbose_name="concluído em")),
            ],
            options={
                "verbose_name": "desafio",
                "verbose_name_plural": "desafios",
                "ordering": ["-start_date", "-created_at"],
            },
        ),
    ]
