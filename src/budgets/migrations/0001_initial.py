import uuid
from decimal import Decimal

import django.core.serializers.json
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


def _base_fields():
    return [
        ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
        ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
        ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="ativo")),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="JobRole",
            fields=_base_fields() + [
                ("role_name", models.CharField(max_length=120, unique=True, verbose_name="cargo")),
                (
                    "base_salary",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                        verbose_name="salário base",
                    ),
                ),
            ],
            options={"verbose_name": "cargo", "verbose_name_plural": "cargos", "ordering": ["role_name"]},
        ),
        migrations.CreateModel(
            name="WorkScale",
            fields=_base_fields() + [
                ("scale_name", models.CharField(max_length=80, unique=True, verbose_name="escala")),
                (
                    "people_quantity",
                    models.PositiveIntegerField(
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                        verbose_name="pessoas por posto",
                    ),
                ),
                ("working_days", models.PositiveIntegerField(default=21, verbose_name="dias trabalhados por mês")),
            ],
            options={
                "verbose_name": "escala de trabalho",
                "verbose_name_plural": "escalas de trabalho",
                "ordering": ["scale_name"],
            },
        ),
        migrations.CreateModel(
            name="City",
            fields=_base_fields() + [
                ("name", models.CharField(max_length=120, unique=True, verbose_name="cidade")),
                (
                    "iss_percent",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=5,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                        verbose_name="ISS (%)",
                    ),
                ),
            ],
            options={"verbose_name": "cidade", "verbose_name_plural": "cidades", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Uniform",
            fields=_base_fields() + [
                ("item_name", models.CharField(max_length=120, verbose_name="item")),
                ("unit_value", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="valor unitário")),
                (
                    "qty_per_collaborator",
                    models.PositiveIntegerField(default=1, verbose_name="quantidade por colaborador"),
                ),
                (
                    "life_time_months",
                    models.PositiveIntegerField(
                        default=12,
                        validators=[django.core.validators.MinValueValidator(1)],
                        verbose_name="vida útil (meses)",
                    ),
                ),
            ],
            options={"verbose_name": "uniforme", "verbose_name_plural": "uniformes", "ordering": ["item_name"]},
        ),
        migrations.CreateModel(
            name="SocialCharge",
            fields=_base_fields() + [
                ("charge_name", models.CharField(max_length=120, verbose_name="encargo")),
                (
                    "percentage",
                    models.DecimalField(
                        decimal_places=4,
                        help_text="Fração da folha: 0.2000 = 20%.",
                        max_digits=7,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                        verbose_name="alíquota",
                    ),
                ),
            ],
            options={
                "verbose_name": "encargo social",
                "verbose_name_plural": "encargos sociais",
                "ordering": ["charge_name"],
            },
        ),
        migrations.CreateModel(
            name="Material",
            fields=_base_fields() + [
                ("name", models.CharField(max_length=120, verbose_name="material")),
                ("unit_value", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="valor unitário")),
            ],
            options={"verbose_name": "material", "verbose_name_plural": "materiais", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="SalaryAddition",
            fields=_base_fields() + [
                ("name", models.CharField(max_length=120, verbose_name="adicional")),
                (
                    "calculation_base",
                    models.CharField(
                        choices=[
                            ("salario_minimo", "Salário mínimo"),
                            ("salario_base", "Salário base"),
                            ("valor_fixo", "Valor fixo"),
                        ],
                        max_length=20,
                        verbose_name="base de cálculo",
                    ),
                ),
                ("percentage", models.DecimalField(decimal_places=2, default=0, max_digits=6, verbose_name="percentual")),
                ("fixed_value", models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="valor fixo")),
            ],
            options={
                "verbose_name": "adicional salarial",
                "verbose_name_plural": "adicionais salariais",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Budget",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
                ("budget_number", models.PositiveIntegerField(editable=False, unique=True, verbose_name="número")),
                ("client", models.CharField(max_length=255, verbose_name="cliente")),
                ("project_name", models.CharField(blank=True, default="", max_length=255, verbose_name="projeto")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("DRAFT", "Rascunho"),
                            ("PENDING", "Pendente"),
                            ("APPROVED", "Aprovado"),
                            ("REJECTED", "Rejeitado"),
                        ],
                        db_index=True,
                        default="DRAFT",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                (
                    "total_value",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0"),
                        editable=False,
                        max_digits=16,
                        verbose_name="valor total",
                    ),
                ),
            ],
            options={"verbose_name": "orçamento", "verbose_name_plural": "orçamentos", "ordering": ["-budget_number"]},
        ),
        migrations.CreateModel(
            name="BudgetPost",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
                ("post_name", models.CharField(max_length=255, verbose_name="posto")),
                (
                    "shift",
                    models.CharField(
                        choices=[("DAY", "Diurno"), ("NIGHT", "Noturno")],
                        default="DAY",
                        max_length=10,
                        verbose_name="turno",
                    ),
                ),
                ("has_intrajornada", models.BooleanField(default=False, verbose_name="intrajornada")),
                (
                    "profit_margin",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("15.00"), max_digits=5, verbose_name="margem de lucro (%)"
                    ),
                ),
                (
                    "salary_additions",
                    models.JSONField(
                        blank=True,
                        default=list,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        verbose_name="adicionais",
                    ),
                ),
                (
                    "materials",
                    models.JSONField(
                        blank=True,
                        default=list,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        verbose_name="materiais",
                    ),
                ),
                (
                    "uniforms",
                    models.JSONField(
                        blank=True,
                        default=list,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        verbose_name="uniformes",
                    ),
                ),
                (
                    "breakdown",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        verbose_name="composição",
                    ),
                ),
                (
                    "total_cost",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0"), max_digits=16, verbose_name="custo total"
                    ),
                ),
                (
                    "budget",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="posts",
                        to="budgets.budget",
                        verbose_name="orçamento",
                    ),
                ),
                (
                    "city",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT, to="budgets.city", verbose_name="cidade"
                    ),
                ),
                (
                    "job_role",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT, to="budgets.jobrole", verbose_name="cargo"
                    ),
                ),
                (
                    "work_scale",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT, to="budgets.workscale", verbose_name="escala"
                    ),
                ),
            ],
            options={"verbose_name": "posto", "verbose_name_plural": "postos", "ordering": ["created_at"]},
        ),
    ]
