import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bills.models import PurchaseBill, SellBill
from apps.bills.services import BillService


GOLD_AND_SILVER = [
    {'metal': 'Gold 22K', 'rate': '6250.50', 'weight': '10.125'},
    {'metal': 'Silver', 'rate': '78.25', 'weight': '100'},
]


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def staff_user(db):
    """Create and return a shop staff user."""
    return User.objects.create_user(
        email='counter@example.com',
        password='TestPass123!',
        display_name='Counter Staff',
    )


@pytest.fixture
def staff_client(api_client, staff_user):
    """Return API client authenticated as staff."""
    refresh = RefreshToken.for_user(staff_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def bill_items():
    """Two items: 63286.31 + 7825.00 = 71111.31 taxable."""
    return [dict(item) for item in GOLD_AND_SILVER]


@pytest.fixture
def make_purchase_bill(db):
    """Factory saving a purchase bill, optionally backdated."""
    def _make(customer='Ramesh Patel', items=None, created_at=None, **kwargs):
        bill = BillService.create_purchase_bill(
            customer=customer,
            items=items or GOLD_AND_SILVER,
            **kwargs
        )
        if created_at is not None:
            PurchaseBill.objects.filter(pk=bill.pk).update(created_at=created_at)
            bill.refresh_from_db()
        return bill
    return _make


@pytest.fixture
def make_sell_bill(db):
    """Factory saving a sell bill, optionally backdated."""
    def _make(customer='Sunita Shah', items=None, created_at=None, **kwargs):
        bill = BillService.create_sell_bill(
            customer=customer,
            items=items or GOLD_AND_SILVER,
            **kwargs
        )
        if created_at is not None:
            SellBill.objects.filter(pk=bill.pk).update(created_at=created_at)
            bill.refresh_from_db()
        return bill
    return _make


@pytest.fixture
def purchase_bill(make_purchase_bill):
    return make_purchase_bill(contact='9876543210', description='Old bangles')


@pytest.fixture
def sell_bill(make_sell_bill):
    return make_sell_bill(contact='9123456780', description='Wedding set')
