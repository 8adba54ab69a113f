"""Budget parameters, budgets and their staffed positions."""
from __future__ import annotations

from decimal import Decimal

from django.core.serializers.json import DjangoJSONEncoder
from django.core.validators import MinValueValidator
from django.db import models

from core.models import TimeStampedModel

FIRST_BUDGET_NUMBER = 100001


class BudgetParameter(TimeStampedModel):
    """Base for the parameter tables edited in the settings screen."""

    is_active = models.BooleanField("ativo", default=True, db_index=True)

    class Meta:
        abstract = True


class JobRole(BudgetParameter):
    role_name = models.CharField("cargo", max_length=120, unique=True)
    base_salary = models.DecimalField(
        "salário base", max_digits=12, decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )

    class Meta:
        verbose_name = "cargo"
        verbose_name_plural = "cargos"
        ordering = ["role_name"]

    def __str__(self):
        return self.role_name


class WorkScale(BudgetParameter):
    scale_name = models.CharField("escala", max_length=80, unique=True)
    people_quantity = models.PositiveIntegerField(
        "pessoas por posto", default=1, validators=[MinValueValidator(1)],
    )
    working_days = models.PositiveIntegerField("dias trabalhados por mês", default=21)

    class Meta:
        verbose_name = "escala de trabalho"
        verbose_name_plural = "escalas de trabalho"
        ordering = ["scale_name"]

    def __str__(self):
        return self.scale_name


class City(BudgetParameter):
    name = models.CharField("cidade", max_length=120, unique=True)
    iss_percent = models.DecimalField(
        "ISS (%)", max_digits=5, decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )

    class Meta:
        verbose_name = "cidade"
        verbose_name_plural = "cidades"
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.iss_percent}%)"


class Uniform(BudgetParameter):
    item_name = models.CharField("item", max_length=120)
    unit_value = models.DecimalField("valor unitário", max_digits=10, decimal_places=2)
    qty_per_collaborator = models.PositiveIntegerField("quantidade por colaborador", default=1)
    life_time_months = models.PositiveIntegerField(
        "vida útil (meses)", default=12, validators=[MinValueValidator(1)],
    )

    class Meta:
        verbose_name = "uniforme"
        verbose_name_plural = "uniformes"
        ordering = ["item_name"]

    def __str__(self):
        return self.item_name


class SocialCharge(BudgetParameter):
    charge_name = models.CharField("encargo", max_length=120)
    percentage = models.DecimalField(
        "alíquota", max_digits=7, decimal_places=4,
        validators=[MinValueValidator(Decimal("0"))],
        help_text="Fração da folha: 0.2000 = 20%.",
    )

    class Meta:
        verbose_name = "encargo social"
        verbose_name_plural = "encargos sociais"
        ordering = ["charge_name"]

    def __str__(self):
        return self.charge_name


class Material(BudgetParameter):
    name = models.CharField("material", max_length=120)
    unit_value = models.DecimalField("valor unitário", max_digits=10, decimal_places=2)

    class Meta:
        verbose_name = "material"
        verbose_name_plural = "materiais"
        ordering = ["name"]

    def __str__(self):
        return self.name


class SalaryAddition(BudgetParameter):
    class CalculationBase(models.TextChoices):
        MINIMUM_WAGE = "salario_minimo", "Salário mínimo"
        BASE_SALARY = "salario_base", "Salário base"
        FIXED_VALUE = "valor_fixo", "Valor fixo"

    name = models.CharField("adicional", max_length=120)
    calculation_base = models.CharField(
        "base de cálculo", max_length=20, choices=CalculationBase.choices,
    )
    percentage = models.DecimalField("percentual", max_digits=6, decimal_places=2, default=0)
    fixed_value = models.DecimalField("valor fixo", max_digits=10, decimal_places=2, default=0)

    class Meta:
        verbose_name = "adicional salarial"
        verbose_name_plural = "adicionais salariais"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Budget(TimeStampedModel):
    class Status(models.TextChoices):
        DRAFT = "DRAFT", "Rascunho"
        PENDING = "PENDING", "Pendente"
        APPROVED = "APPROVED", "Aprovado"
        REJECTED = "REJECTED", "Rejeitado"

    budget_number = models.PositiveIntegerField("número", unique=True, editable=False)
    client = models.CharField("cliente", max_length=255)
    project_name = models.CharField("projeto", max_length=255, blank=True, default="")
    status = models.CharField(
        "status", max_length=20, choices=Status.choices, default=Status.DRAFT, db_index=True,
    )
    total_value = models.DecimalField(
        "valor total", max_digits=16, decimal_places=2, default=Decimal("0"), editable=False,
    )

    class Meta:
        verbose_name = "orçamento"
        verbose_name_plural = "orçamentos"
        ordering = ["-budget_number"]

    def __str__(self):
        return f"#{self.budget_number} - {self.project_name or self.client}"

    def save(self, *args, **kwargs):
        if not self.budget_number:
            last = Budget.objects.aggregate(models.Max("budget_number"))["budget_number__max"]
            self.budget_number = (last or FIRST_BUDGET_NUMBER - 1) + 1
        if not self.project_name:
            self.project_name = self.client
        super().save(*args, **kwargs)


class BudgetPost(TimeStampedModel):
    """A staffed position of a budget with its computed monthly cost."""

    class Shift(models.TextChoices):
        DAY = "DAY", "Diurno"
        NIGHT = "NIGHT", "Noturno"

    budget = models.ForeignKey(
        Budget, on_delete=models.CASCADE, related_name="posts", verbose_name="orçamento",
    )
    post_name = models.CharField("posto", max_length=255)
    job_role = models.ForeignKey(JobRole, on_delete=models.PROTECT, verbose_name="cargo")
    work_scale = models.ForeignKey(WorkScale, on_delete=models.PROTECT, verbose_name="escala")
    city = models.ForeignKey(City, on_delete=models.PROTECT, verbose_name="cidade")
    shift = models.CharField("turno", max_length=10, choices=Shift.choices, default=Shift.DAY)
    has_intrajornada = models.BooleanField("intrajornada", default=False)
    profit_margin = models.DecimalField(
        "margem de lucro (%)", max_digits=5, decimal_places=2, default=Decimal("15.00"),
    )
    # Snapshots of the lines used in the calculation.
    salary_additions = models.JSONField("adicionais", default=list, blank=True, encoder=DjangoJSONEncoder)
    materials = models.JSONField("materiais", default=list, blank=True, encoder=DjangoJSONEncoder)
    uniforms = models.JSONField("uniformes", default=list, blank=True, encoder=DjangoJSONEncoder)
    breakdown = models.JSONField("composição", default=dict, blank=True, encoder=DjangoJSONEncoder)
    total_cost = models.DecimalField("custo total", max_digits=16, decimal_places=2, default=Decimal("0"))

    class Meta:
        verbose_name = "posto"
        verbose_name_plural = "postos"
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.post_name} ({self.budget})"
