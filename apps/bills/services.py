"""
Bill Services Module
====================

Business logic for pricing, saving and removing purchase and sell bills.

Every money figure is computed with the helpers in ``apps.common.finance``
so item amounts, subtotals and GST are always rounded to 2 places.

Example:
    Saving a purchase bill::

        from apps.bills.services import BillService

        bill = BillService.create_purchase_bill(
            customer='Ramesh Patel',
            items=[{'metal': 'Gold 22K', 'rate': '6250.50', 'weight': '10.125'}],
        )
        bill.total          # Decimal('63286.31'), taxable subtotal
        bill.gst            # Decimal('1898.59')
        bill.totals().grand_total   # Decimal('65184.90')
"""

import logging
from decimal import Decimal

from django.db import IntegrityError, transaction

from apps.common.exceptions import require_delete_confirmation
from apps.common.finance import add, gst, multiply, sum_amounts, to_decimal
from .exceptions import (
    BillAmountTooLargeError,
    BillNumberConflictError,
    EmptyBillError,
    InvalidBillItemError,
)
from .models import PurchaseBill, SellBill

logger = logging.getLogger(__name__)

# Placeholder stored for optional sell bill fields left blank
NOT_AVAILABLE = 'N/A'

# Largest figure the 14-digit, 2-place money columns hold
MAX_AMOUNT = Decimal('999999999999.99')

# Attempts at claiming a bill number before giving up
BILL_NUMBER_RETRIES = 5


class BillService:
    """
    Service for creating and deleting bills.

    Purchase bills persist the taxable subtotal as ``total``; sell bills
    persist the grand total. Both persist ``gst`` separately.

    Methods:
        price_items: Normalize items and compute each line amount.
        compute_totals: Subtotal and GST for priced items.
        create_purchase_bill: Save a purchase bill.
        create_sell_bill: Save a sell bill.
        delete_bill: Remove a bill after typed confirmation.
    """

    @staticmethod
    def price_items(items, require_positive=True):
        """
        Normalize raw items and compute ``amount = round2(rate * weight)``.

        Numbers are stored as decimal strings so the JSON column keeps them
        exact.

        Args:
            items (list[dict]): Items with ``metal``, ``rate`` and ``weight``.
            require_positive (bool): Reject items without a metal or with a
                zero rate or weight. Negative values are always rejected.

        Returns:
            list[dict]: Items with ``metal``, ``rate``, ``weight`` and ``amount``.

        Raises:
            EmptyBillError: If there are no items.
            InvalidBillItemError: If an item fails validation.
        """
        if not items:
            raise EmptyBillError("A bill needs at least one item")

        priced = []
        for position, item in enumerate(items, start=1):
            metal = str(item.get('metal') or '').strip()
            rate = to_decimal(item.get('rate'))
            weight = to_decimal(item.get('weight'))

            if rate < 0 or weight < 0:
                raise InvalidBillItemError(f"Item {position}: rate and weight cannot be negative")
            if require_positive and (not metal or rate <= 0 or weight <= 0):
                raise InvalidBillItemError(
                    f"Item {position}: metal, rate and weight are required and must be greater than zero"
                )

            amount = multiply(rate, weight)
            if amount > MAX_AMOUNT:
                raise BillAmountTooLargeError(f"Item {position}: amount {amount} is too large")

            priced.append({
                'metal': metal,
                'rate': str(rate),
                'weight': str(weight),
                'amount': str(amount),
            })
        return priced

    @staticmethod
    def compute_totals(priced_items):
        """
        Return ``(subtotal, gst)`` for items priced by ``price_items``.

        Raises:
            BillAmountTooLargeError: If the grand total would not fit a money column.
        """
        subtotal = sum_amounts(item['amount'] for item in priced_items)
        tax = gst(subtotal)
        grand_total = add(subtotal, tax)
        if grand_total > MAX_AMOUNT:
            raise BillAmountTooLargeError(f"Bill total {grand_total} is too large")
        return subtotal, tax

    @staticmethod
    def _next_bill_number(model):
        """Next number in the model's sequence, starting at 1."""
        last = model.objects.order_by('-bill_number').values_list('bill_number', flat=True).first()
        return (last or 0) + 1

    @staticmethod
    def _create_numbered(model, max_retries=BILL_NUMBER_RETRIES, **fields):
        """
        Save a bill under the next free number.

        Two concurrent saves can compute the same number; the unique
        constraint rejects the later one, which retries with a fresh number.

        Raises:
            BillNumberConflictError: If every attempt collided.
        """
        for attempt in range(max_retries):
            try:
                with transaction.atomic():
                    return model.objects.create(bill_number=BillService._next_bill_number(model), **fields)
            except IntegrityError:
                if attempt == max_retries - 1:
                    raise BillNumberConflictError(
                        f"Failed to assign a {model.kind.label.lower()} number after {max_retries} attempts"
                    )
                logger.warning("Bill number collision on %s, retrying", model.kind.label)

        # Should never reach here
        raise BillNumberConflictError("Unexpected error in bill numbering")

    @staticmethod
    @transaction.atomic
    def create_purchase_bill(*, customer, items, contact='', description=''):
        """
        Save a purchase bill.

        ``total`` is the taxable subtotal and ``gst`` is 3% of it.
        """
        priced = BillService.price_items(items, require_positive=True)
        subtotal, tax = BillService.compute_totals(priced)

        bill = BillService._create_numbered(
            PurchaseBill,
            customer=customer.strip(),
            contact=(contact or '').strip(),
            description=(description or '').strip(),
            items=priced,
            total=subtotal,
            gst=tax,
        )
        logger.info("Created purchase bill %s for %s, taxable %s", bill.display_number, bill.customer, subtotal)
        return bill

    @staticmethod
    @transaction.atomic
    def create_sell_bill(*, items, customer='', contact='', description=''):
        """
        Save a sell bill.

        ``total`` is the grand total, subtotal plus GST. Blank customer and
        description are stored as ``N/A``.
        """
        priced = BillService.price_items(items, require_positive=False)
        subtotal, tax = BillService.compute_totals(priced)

        bill = BillService._create_numbered(
            SellBill,
            customer=(customer or '').strip() or NOT_AVAILABLE,
            contact=(contact or '').strip(),
            description=(description or '').strip() or NOT_AVAILABLE,
            items=priced,
            total=add(subtotal, tax),
            gst=tax,
        )
        logger.info("Created sell bill %s for %s, total %s", bill.display_number, bill.customer, bill.total)
        return bill

    @staticmethod
    @transaction.atomic
    def delete_bill(bill, *, confirm):
        """
        Delete a bill once the caller typed ``DELETE``.

        Raises:
            DeleteNotConfirmedError: If ``confirm`` is anything else.
        """
        require_delete_confirmation(confirm)
        label = f"{bill.kind} bill {bill.display_number}"
        bill.delete()
        logger.info("Deleted %s", label)
