"""
Expenses App - Shop expenses

Rent, wages, hallmarking fees and other outgoings, each with an optional GST
component that counts towards input tax credit on the dashboard.
"""
