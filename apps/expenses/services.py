"""Expense recording and removal."""

import logging

from django.db import transaction

from apps.common.exceptions import require_delete_confirmation
from apps.common.finance import round2
from .exceptions import InvalidExpenseError
from .models import Expense

logger = logging.getLogger(__name__)


class ExpenseService:

    @staticmethod
    @transaction.atomic
    def create_expense(*, expense_type, amount, gst=None, description=''):
        """
        Save an expense with amount and GST rounded to 2 places.

        A missing GST is stored as zero.

        Raises:
            InvalidExpenseError: If the type is blank or a figure is negative.
        """
        expense_type = (expense_type or '').strip()
        if not expense_type:
            raise InvalidExpenseError("Expense type is required")

        amount = round2(amount)
        gst = round2(gst)
        if amount < 0 or gst < 0:
            raise InvalidExpenseError("Amount and GST cannot be negative")

        expense = Expense.objects.create(
            type=expense_type,
            amount=amount,
            gst=gst,
            description=(description or '').strip(),
        )
        logger.info("Recorded expense %s: %s + GST %s", expense.type, amount, gst)
        return expense

    @staticmethod
    @transaction.atomic
    def delete_expense(expense, *, confirm):
        """
        Delete an expense once the caller typed ``DELETE``.

        Raises:
            DeleteNotConfirmedError: If ``confirm`` is anything else.
        """
        require_delete_confirmation(confirm)
        label = f"{expense.type} ({expense.id})"
        expense.delete()
        logger.info("Deleted expense %s", label)
