import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SystemConfiguration",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
                ("config_type", models.CharField(max_length=80, unique=True, verbose_name="tipo")),
                ("config_data", models.JSONField(blank=True, default=list, verbose_name="dados")),
            ],
            options={
                "verbose_name": "configuração do sistema",
                "verbose_name_plural": "configurações do sistema",
                "ordering": ["config_type"],
            },
        ),
    ]
