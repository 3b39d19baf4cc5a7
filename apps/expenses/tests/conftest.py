import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.expenses.models import Expense
from apps.expenses.services import ExpenseService


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        email='accounts@example.com',
        password='TestPass123!',
        display_name='Accounts Staff',
    )


@pytest.fixture
def staff_client(api_client, staff_user):
    """Return API client authenticated as staff."""
    refresh = RefreshToken.for_user(staff_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def make_expense(db):
    """Factory recording an expense, optionally backdated."""
    def _make(expense_type='Rent', amount='15000', gst=None, created_at=None, **kwargs):
        expense = ExpenseService.create_expense(
            expense_type=expense_type,
            amount=amount,
            gst=gst,
            **kwargs
        )
        if created_at is not None:
            Expense.objects.filter(pk=expense.pk).update(created_at=created_at)
            expense.refresh_from_db()
        return expense
    return _make


@pytest.fixture
def hallmark_expense(make_expense):
    """Hallmarking fee with 18% GST charged by the centre."""
    return make_expense(
        expense_type='Hallmarking',
        amount=Decimal('1250.00'),
        gst=Decimal('225.00'),
        description='HUID for 25 pieces',
    )
