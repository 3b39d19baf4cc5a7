"""
Shared helpers used by the bills, expenses and analytics apps.

- finance: 2-decimal money arithmetic, GST and rupee formatting
- ist: India Standard Time period boundaries and display formatting
- filters: month / custom-range query parameters and ORM lookups
- exceptions, serializers: typed delete confirmation

finance and ist are pure Python with no Django dependency.
"""
