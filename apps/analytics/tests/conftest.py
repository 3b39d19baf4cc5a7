import pytest
from datetime import datetime, timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bills.models import PurchaseBill, SellBill
from apps.bills.services import BillService
from apps.expenses.models import Expense
from apps.expenses.services import ExpenseService


# Mid-January 2026 and the first instant of February 2026 in IST
IN_JANUARY = datetime(2026, 1, 15, 6, 30, tzinfo=timezone.utc)
FEBRUARY_START = datetime(2026, 1, 31, 18, 30, tzinfo=timezone.utc)


def backdate(model, record, created_at):
    model.objects.filter(pk=record.pk).update(created_at=created_at)
    record.refresh_from_db()
    return record


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def analytics_user(db):
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        display_name='Shop Owner',
    )


@pytest.fixture
def analytics_client(api_client, analytics_user):
    """Return API client authenticated as the shop owner."""
    refresh = RefreshToken.for_user(analytics_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def january_sales(db):
    """Two sell bills: 85604.65 grand total, 2493.34 GST."""
    first = BillService.create_sell_bill(
        customer='Sunita Shah',
        items=[
            {'metal': 'Gold 22K', 'rate': '6250.50', 'weight': '10.125'},
            {'metal': 'Silver', 'rate': '78.25', 'weight': '100'},
        ],
    )
    second = BillService.create_sell_bill(
        customer='Asha Mehta',
        items=[{'metal': 'Gold 22K', 'rate': '6000', 'weight': '2'}],
    )
    return [backdate(SellBill, bill, IN_JANUARY) for bill in (first, second)]


@pytest.fixture
def january_purchase(db):
    """Purchase bill: 31900.00 taxable, 957.00 GST."""
    bill = BillService.create_purchase_bill(
        customer='Ramesh Patel',
        items=[{'metal': 'Gold 22K', 'rate': '5800', 'weight': '5.5'}],
    )
    return backdate(PurchaseBill, bill, IN_JANUARY)


@pytest.fixture
def january_expense(db):
    """Expense: 1250.00 plus 225.00 GST."""
    expense = ExpenseService.create_expense(expense_type='Hallmarking', amount='1250', gst='225')
    return backdate(Expense, expense, IN_JANUARY)


@pytest.fixture
def february_sale(db):
    """Sell bill at the first instant of February, outside January."""
    bill = BillService.create_sell_bill(
        customer='Late Customer',
        items=[{'metal': 'Silver', 'rate': '80', 'weight': '10'}],
    )
    return backdate(SellBill, bill, FEBRUARY_START)


@pytest.fixture
def january_ledger(january_sales, january_purchase, january_expense, february_sale):
    """All records for the January 2026 dashboard."""
    return {
        'sales': january_sales,
        'purchase': january_purchase,
        'expense': january_expense,
        'outside': february_sale,
    }
