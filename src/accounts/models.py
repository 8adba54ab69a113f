import uuid

from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin,
)
from django.db import models
from django.utils import timezone

from accounts import employees


class UserManager(BaseUserManager):
    """Custom manager for the User model that uses email as the unique identifier."""

    use_in_migrations = True

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("O e-mail é obrigatório.")
        email = self.normalize_email(email)
        extra_fields.setdefault("is_active", True)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("role", User.Role.ADMIN)
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("O superusuário precisa ter is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("O superusuário precisa ter is_superuser=True.")

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Employee of the commercial team.

    Uses email as the unique identifier instead of a username. The role
    decides which weekly metrics apply (SDR vs closer) and whether the
    employee takes part in challenges by default (admins never do).
    Employees that never log in simply keep an unusable password.
    """

    class Role(models.TextChoices):
        SDR = employees.SDR, "SDR"
        CLOSER = employees.CLOSER, "Closer"
        ADMIN = employees.ADMIN, "Administrador"

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    email = models.EmailField(
        "e-mail",
        unique=True,
        error_messages={
            "unique": "Já existe um usuário com este e-mail.",
        },
    )
    first_name = models.CharField("nome", max_length=150)
    last_name = models.CharField("sobrenome", max_length=150, blank=True, default="")
    role = models.CharField(
        "função",
        max_length=20,
        choices=Role.choices,
        default=Role.SDR,
        db_index=True,
    )
    department = models.CharField("departamento", max_length=120, blank=True, default="")
    position = models.CharField("cargo", max_length=120, blank=True, default="")
    admission_date = models.DateField("data de admissão", null=True, blank=True)
    is_active = models.BooleanField("ativo", default=True, db_index=True)
    is_staff = models.BooleanField("equipe", default=False)
    date_joined = models.DateTimeField("data de cadastro", default=timezone.now)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["first_name"]

    class Meta:
        verbose_name = "funcionário"
        verbose_name_plural = "funcionários"
        ordering = ["first_name", "last_name"]

    def __str__(self):
        return self.get_full_name() or self.email

    def get_full_name(self):
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name

    def get_short_name(self):
        return self.first_name

    # ------------------------------------------------------------------
    # Role helper properties
    # ------------------------------------------------------------------

    @property
    def is_admin(self):
        return self.role == self.Role.ADMIN

    @property
    def is_closer(self):
        return self.role == self.Role.CLOSER

    @property
    def is_sdr(self):
        return self.role == self.Role.SDR
