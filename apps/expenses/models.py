from decimal import Decimal
import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.common.finance import BillTotals, add, round2


class Expense(models.Model):
    """Miscellaneous shop expense; ``amount`` excludes GST."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    type = models.CharField(max_length=100)
    description = models.TextField(blank=True)

    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    gst = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'expenses'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.type} - {self.amount}"

    @property
    def total_expense(self):
        """Amount plus GST; computed, never stored."""
        return add(self.amount, self.gst)

    def totals(self) -> BillTotals:
        return BillTotals(
            taxable=round2(self.amount),
            tax=round2(self.gst),
            grand_total=self.total_expense,
        )
