from django.contrib import admin

from apps.common.finance import format_currency
from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['type', 'amount', 'gst', 'total_expense_display', 'created_at']
    list_filter = ['type']
    search_fields = ['type', 'description']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    readonly_fields = ['created_at']

    def total_expense_display(self, obj):
        return format_currency(obj.total_expense)
    total_expense_display.short_description = 'Total'
