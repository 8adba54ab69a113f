import uuid

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
            name="WeeklyPerformance",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
                ("week_ending_date", models.DateField(db_index=True, verbose_name="fim da semana")),
                ("education_points", models.PositiveIntegerField(default=0, verbose_name="pontos de educação")),
                ("proposals_presented", models.PositiveIntegerField(default=0, verbose_name="propostas apresentadas")),
                ("contracts_signed", models.PositiveIntegerField(default=0, verbose_name="contratos assinados")),
                ("mql", models.PositiveIntegerField(default=0, verbose_name="MQL")),
                ("visits_scheduled", models.PositiveIntegerField(default=0, verbose_name="visitas agendadas")),
                ("total_points", models.IntegerField(default=0, verbose_name="total de pontos")),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="weekly_performances",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="funcionário",
                    ),
                ),
            ],
            options={
                "verbose_name": "desempenho semanal",
                "verbose_name_plural": "desempenhos semanais",
                "ordering": ["-week_ending_date"],
            },
        ),
        migrations.AddConstraint(
            model_name="weeklyperformance",
            constraint=models.UniqueConstraint(
                fields=("employee", "week_ending_date"),
                name="uniq_weekly_performance_employee_week",
            ),
        ),
    ]
