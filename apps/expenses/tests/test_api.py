import pytest
from datetime import datetime, timedelta, timezone
from django.urls import reverse
from rest_framework import status
from apps.expenses.models import Expense


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def result_ids(response):
    return [row['id'] for row in response.data['results']]


@pytest.mark.django_db
class TestCreateExpense:
    """Tests for POST /api/expenses/"""

    def test_create_success(self, staff_client):
        url = reverse('expenses:expense-list')
        data = {'type': 'Electricity', 'amount': '3200.50', 'gst': '576.09', 'description': 'June bill'}
        response = staff_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '3200.50'
        assert response.data['gst'] == '576.09'
        assert response.data['total_expense'] == '3776.59'
        assert response.data['grand_total'] == '3776.59'
        assert Expense.objects.count() == 1

    def test_gst_optional(self, staff_client):
        url = reverse('expenses:expense-list')
        response = staff_client.post(url, {'type': 'Tea', 'amount': '120'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['gst'] == '0.00'
        assert response.data['total_expense'] == '120.00'

    def test_largest_amounts_render(self, staff_client):
        """Amount plus GST may need one more digit than either column."""
        url = reverse('expenses:expense-list')
        data = {'type': 'Vault', 'amount': '999999999999.99', 'gst': '999999999999.99'}
        response = staff_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['total_expense'] == '1999999999999.98'

    @pytest.mark.parametrize('data', [
        {'amount': '100'},
        {'type': '', 'amount': '100'},
        {'type': 'Rent'},
        {'type': 'Rent', 'amount': '-5'},
        {'type': 'Rent', 'amount': 'abc'},
    ])
    def test_invalid_input(self, staff_client, data):
        url = reverse('expenses:expense-list')
        response = staff_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Expense.objects.exists()

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('expenses:expense-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestListExpenses:
    """Tests for GET /api/expenses/"""

    def test_default_is_current_month(self, staff_client, make_expense):
        current = make_expense()
        make_expense(created_at=utc(2020, 1, 1))

        response = staff_client.get(reverse('expenses:expense-list'))

        assert response.status_code == status.HTTP_200_OK
        assert result_ids(response) == [str(current.id)]

    def test_month_is_half_open(self, staff_client, make_expense):
        start = utc(2026, 2, 28, 18, 30)  # March 1st 00:00 IST
        inside = make_expense(created_at=start)
        make_expense(created_at=start - timedelta(milliseconds=1))

        url = reverse('expenses:expense-list')
        response = staff_client.get(url, {'month': 2, 'year': 2026})

        assert result_ids(response) == [str(inside.id)]

    def test_custom_range_is_closed(self, staff_client, make_expense):
        last_instant = utc(2026, 3, 31, 18, 29, 59, 999000)
        inside = make_expense(created_at=last_instant)
        make_expense(created_at=last_instant + timedelta(milliseconds=1))

        url = reverse('expenses:expense-list')
        response = staff_client.get(url, {'mode': 'custom', 'end_date': '2026-03-31'})

        assert result_ids(response) == [str(inside.id)]

    def test_display_timestamp(self, staff_client, make_expense):
        expense = make_expense(created_at=utc(2026, 1, 15, 10))

        url = reverse('expenses:expense-detail', args=[expense.id])
        response = staff_client.get(url)

        assert response.data['created_at_display'] == '15 Jan 2026, 03:30 pm'


@pytest.mark.django_db
class TestDeleteExpense:
    """Tests for DELETE /api/expenses/{id}/"""

    def test_requires_confirmation(self, staff_client, hallmark_expense):
        url = reverse('expenses:expense-detail', args=[hallmark_expense.id])
        response = staff_client.delete(url, {'confirm': 'yes'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Expense.objects.filter(pk=hallmark_expense.pk).exists()

    def test_confirmed(self, staff_client, hallmark_expense):
        url = reverse('expenses:expense-detail', args=[hallmark_expense.id])
        response = staff_client.delete(url, {'confirm': 'DELETE'}, format='json')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Expense.objects.exists()

    def test_list_body_with_query_param(self, staff_client, hallmark_expense):
        """A JSON list body carries no confirmation; the query parameter still counts."""
        url = reverse('expenses:expense-detail', args=[hallmark_expense.id])

        response = staff_client.delete(url, ['DELETE'], format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        response = staff_client.delete(f'{url}?confirm=DELETE', ['DELETE'], format='json')
        assert response.status_code == status.HTTP_204_NO_CONTENT
