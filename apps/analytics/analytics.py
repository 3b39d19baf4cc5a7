"""
Analytics Module
=================

Monthly rollup of sales, purchases and expenses for the dashboard.

Classes:
    DashboardQueries: Static methods for dashboard figures.

Every figure is summed from the records' ``totals()`` so the different
``total`` conventions of purchase and sell bills never leak into the sums.

Example:
    Summary for January 2026 (months are 0-based)::

        from apps.analytics.analytics import DashboardQueries

        summary = DashboardQueries.monthly_summary(month=0, year=2026)
        summary['sales']['total']        # grand total of sell bills
        summary['net']['gst_payable']    # output GST minus input GST

Note:
    This module is read-only and doesn't modify any data.
"""

import logging

from apps.bills.models import PurchaseBill, SellBill
from apps.common.finance import add, subtract, sum_amounts
from apps.common.ist import month_bounds, month_label, to_utc_iso
from apps.expenses.models import Expense
from .exceptions import InvalidPeriodError

logger = logging.getLogger(__name__)


class DashboardQueries:
    """
    Queries behind the dashboard endpoint.

    Methods:
        category_totals: Count and summed totals of records.
        net_position: GST payable and cash flow from category totals.
        monthly_summary: Everything the dashboard shows for an IST month.
    """

    @staticmethod
    def category_totals(records):
        """
        Sum the named totals of records.

        Returns:
            dict: ``count``, ``amount`` (taxable), ``gst`` and ``total``
            (grand total).
        """
        totals = [record.totals() for record in records]
        return {
            'count': len(totals),
            'amount': sum_amounts(t.taxable for t in totals),
            'gst': sum_amounts(t.tax for t in totals),
            'total': sum_amounts(t.grand_total for t in totals),
        }

    @staticmethod
    def net_position(sales, purchases, expenses):
        """
        Net GST and cash movement for a period.

        GST payable is output GST on sales less input GST on purchases and
        expenses. Inflow is what customers paid, outflow what the shop paid.
        """
        inflow = sales['total']
        outflow = add(purchases['total'], expenses['total'])
        return {
            'gst_payable': subtract(sales['gst'], add(purchases['gst'], expenses['gst'])),
            'inflow': inflow,
            'outflow': outflow,
            'cash_flow': subtract(inflow, outflow),
        }

    @staticmethod
    def monthly_summary(month, year):
        """
        Dashboard figures for an IST calendar month.

        Args:
            month (int): 0-based month; values outside 0-11 roll over.
            year (int): Calendar year.

        Returns:
            dict: ``period``, ``sales``, ``purchases``, ``expenses`` and ``net``.

        Raises:
            InvalidPeriodError: If the month cannot be represented.
        """
        try:
            start, end = month_bounds(month, year)
        except ValueError:
            raise InvalidPeriodError(f"Invalid period: month {month} of {year}")

        in_month = {'created_at__gte': start, 'created_at__lt': end}

        sales = DashboardQueries.category_totals(SellBill.objects.filter(**in_month))
        purchases = DashboardQueries.category_totals(PurchaseBill.objects.filter(**in_month))
        expenses = DashboardQueries.category_totals(Expense.objects.filter(**in_month))

        logger.debug(
            "Dashboard %s: %d sales, %d purchases, %d expenses",
            month_label(month, year), sales['count'], purchases['count'], expenses['count'],
        )

        return {
            'period': {
                'month': month,
                'year': year,
                'label': month_label(month, year),
                'start': to_utc_iso(start),
                'end': to_utc_iso(end),
            },
            'sales': sales,
            'purchases': purchases,
            'expenses': expenses,
            'net': DashboardQueries.net_position(sales, purchases, expenses),
        }
