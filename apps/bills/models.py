
from decimal import Decimal
import uuid

from django.core.serializers.json import DjangoJSONEncoder
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.common.finance import BillTotals, add, round2, subtract


class BillKind(models.TextChoices):
    PURCHASE = 'purchase', 'Purchase Bill'
    SELL = 'sell', 'Sell Bill'


class BaseBill(models.Model):
    """
    Fields shared by purchase and sell bills.

    ``items`` is an ordered list of ``{metal, rate, weight, amount}`` with the
    numbers kept as decimal strings. What ``total`` holds differs per
    subclass; read money through ``totals()``.
    """

    kind = None

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bill_number = models.PositiveIntegerField(unique=True, editable=False)

    customer = models.CharField(max_length=200)
    contact = models.CharField(max_length=50, blank=True)
    description = models.TextField(blank=True)
    items = models.JSONField(default=list, encoder=DjangoJSONEncoder)

    # Financial details
    total = models.DecimalField(
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
        abstract = True
        ordering = ['-created_at', '-bill_number']

    def __str__(self):
        return f"{self.display_number} - {self.customer}"

    @property
    def display_number(self):
        return f"BILL-{self.bill_number:04d}" if self.bill_number else "BILL-NEW"

    def totals(self) -> BillTotals:
        raise NotImplementedError


class PurchaseBill(BaseBill):
    """Metal bought from a customer; ``total`` is the taxable subtotal."""

    kind = BillKind.PURCHASE

    class Meta(BaseBill.Meta):
        db_table = 'purchase_bills'

    def totals(self) -> BillTotals:
        return BillTotals(
            taxable=round2(self.total),
            tax=round2(self.gst),
            grand_total=add(self.total, self.gst),
        )


class SellBill(BaseBill):
    """Metal sold to a customer; ``total`` is the grand total including GST."""

    kind = BillKind.SELL

    class Meta(BaseBill.Meta):
        db_table = 'sell_bills'

    def totals(self) -> BillTotals:
        return BillTotals(
            taxable=subtract(self.total, self.gst),
            tax=round2(self.gst),
            grand_total=round2(self.total),
        )
