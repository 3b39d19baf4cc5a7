"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 2 staff accounts (owner, counter)
- Purchase and sell bills spread over the current and previous IST month
- Expenses for both months
"""

from datetime import timedelta
from decimal import Decimal
import random

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User
from apps.bills.models import PurchaseBill, SellBill
from apps.bills.services import BillService
from apps.common.ist import current_ist_month, month_bounds
from apps.expenses.models import Expense
from apps.expenses.services import ExpenseService


METAL_RATES = {
    'Gold 24K': Decimal('7250.00'),
    'Gold 22K': Decimal('6650.00'),
    'Gold 18K': Decimal('5440.00'),
    'Silver': Decimal('88.50'),
}

CUSTOMERS = [
    ('Ramesh Patel', '9876543210'),
    ('Sunita Shah', '9123456780'),
    ('Asha Mehta', '9988776655'),
    ('Vikram Desai', ''),
    ('Farida Khan', '9090909090'),
]

EXPENSES = [
    ('Rent', Decimal('25000.00'), Decimal('4500.00')),
    ('Electricity', Decimal('3200.50'), Decimal('0.00')),
    ('Hallmarking', Decimal('1250.00'), Decimal('225.00')),
    ('Staff tea', Decimal('640.00'), Decimal('0.00')),
]


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing bills and expenses before creating new sample data',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for repeatable data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options['seed'])

        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        self.create_users()

        month, year = current_ist_month()
        for offset in (-1, 0):
            start, end = month_bounds(month + offset, year)
            self.create_bills(rng, start, end)
            self.create_expenses(start, end)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  owner@example.com / owner123 (superuser)')
        self.stdout.write('  counter@example.com / password123')

    def clear_data(self):
        """Clear all records from the database."""
        PurchaseBill.objects.all().delete()
        SellBill.objects.all().delete()
        Expense.objects.all().delete()

    def create_users(self):
        """Create staff accounts."""
        self.stdout.write('  Creating users...')

        owner, _ = User.objects.get_or_create(
            email='owner@example.com',
            defaults={
                'display_name': 'Shop Owner',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        owner.set_password('owner123')
        owner.save()

        counter, _ = User.objects.get_or_create(
            email='counter@example.com',
            defaults={'display_name': 'Counter Staff'}
        )
        counter.set_password('password123')
        counter.save()

    def random_items(self, rng):
        items = []
        for metal in rng.sample(sorted(METAL_RATES), k=rng.randint(1, 3)):
            weight = Decimal(rng.randint(500, 25000)) / 1000
            if metal == 'Silver':
                weight *= 20
            items.append({'metal': metal, 'rate': METAL_RATES[metal], 'weight': weight})
        return items

    def random_moment(self, rng, start, end):
        span = (end - start).total_seconds()
        return start + timedelta(seconds=rng.uniform(0, span - 1))

    def create_bills(self, rng, start, end):
        """Create purchase and sell bills within [start, end)."""
        self.stdout.write(f'  Creating bills from {start:%Y-%m-%d}...')

        for _ in range(4):
            customer, contact = rng.choice(CUSTOMERS)
            bill = BillService.create_purchase_bill(
                customer=customer,
                contact=contact,
                description='Old ornaments exchanged',
                items=self.random_items(rng),
            )
            PurchaseBill.objects.filter(pk=bill.pk).update(created_at=self.random_moment(rng, start, end))

        for _ in range(6):
            customer, contact = rng.choice(CUSTOMERS)
            bill = BillService.create_sell_bill(
                customer=customer,
                contact=contact,
                items=self.random_items(rng),
            )
            SellBill.objects.filter(pk=bill.pk).update(created_at=self.random_moment(rng, start, end))

    def create_expenses(self, start, end):
        """Create one of each sample expense within [start, end)."""
        self.stdout.write(f'  Creating expenses from {start:%Y-%m-%d}...')

        for day, (expense_type, amount, gst) in enumerate(EXPENSES, start=1):
            expense = ExpenseService.create_expense(expense_type=expense_type, amount=amount, gst=gst)
            moment = min(start + timedelta(days=day * 3), end - timedelta(seconds=1))
            Expense.objects.filter(pk=expense.pk).update(created_at=moment)
