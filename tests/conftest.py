from datetime import date
from decimal import Decimal

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from accounts.models import User
from commercial.models import Proposal


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email="admin@test.com",
        password="testpass123",
        first_name="Admin",
        last_name="User",
        role=User.Role.ADMIN,
    )


@pytest.fixture
def closer_user(db):
    return User.objects.create_user(
        email="closer@test.com",
        password="testpass123",
        first_name="Carla",
        last_name="Closer",
        role=User.Role.CLOSER,
    )


@pytest.fixture
def sdr_user(db):
    return User.objects.create_user(
        email="sdr@test.com",
        password="testpass123",
        first_name="Sergio",
        last_name="SDR",
        role=User.Role.SDR,
    )


@pytest.fixture
def won_proposal(closer_user, sdr_user):
    return Proposal.objects.create(
        client="Cliente Ganho",
        monthly_value=Decimal("10000"),
        months=12,
        status=Proposal.Status.WON,
        closing_date=date(2025, 3, 14),
        closer=closer_user,
        sdr=sdr_user,
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def closer_client(closer_user):
    client = APIClient()
    client.force_authenticate(user=closer_user)
    return client
