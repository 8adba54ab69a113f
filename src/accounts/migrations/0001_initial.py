import uuid

import django.utils.timezone
from django.db import migrations, models

import accounts.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "email",
                    models.EmailField(
                        error_messages={"unique": "Já existe um usuário com este e-mail."},
                        max_length=254,
                        unique=True,
                        verbose_name="e-mail",
                    ),
                ),
                ("first_name", models.CharField(max_length=150, verbose_name="nome")),
                ("last_name", models.CharField(blank=True, default="", max_length=150, verbose_name="sobrenome")),
                (
                    "role",
                    models.CharField(
                        choices=[("SDR", "SDR"), ("CLOSER", "Closer"), ("ADMIN", "Administrador")],
                        db_index=True,
                        default="SDR",
                        max_length=20,
                        verbose_name="função",
                    ),
                ),
                ("department", models.CharField(blank=True, default="", max_length=120, verbose_name="departamento")),
                ("position", models.CharField(blank=True, default="", max_length=120, verbose_name="cargo")),
                ("admission_date", models.DateField(blank=True, null=True, verbose_name="data de admissão")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="ativo")),
                ("is_staff", models.BooleanField(default=False, verbose_name="equipe")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="data de cadastro")),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "verbose_name": "funcionário",
                "verbose_name_plural": "funcionários",
                "ordering": ["first_name", "last_name"],
            },
            managers=[
                ("objects", accounts.models.UserManager()),
            ],
        ),
    ]
