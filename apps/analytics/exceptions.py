"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidPeriodError

Usage:
    from apps.analytics.exceptions import AnalyticsServiceError

    try:
        data = DashboardQueries.monthly_summary(month, year)
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=400)
"""


class AnalyticsServiceError(Exception):
    """Base exception for all analytics service errors."""

    pass


class InvalidPeriodError(AnalyticsServiceError):
    """
    Raised when a reporting period cannot be computed.

    Example:
        raise InvalidPeriodError("Invalid period: month 0 of 0")
    """

    pass
