from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema
from .analytics import DashboardQueries
from .serializers import (
    DashboardQuerySerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    parameters=[DashboardQuerySerializer],
    responses={
        200: DashboardResponseSerializer,
        400: ErrorSerializer,
    },
    description="Sales, purchases, expenses and net GST / cash flow for an IST month.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Monthly dashboard rollup - thin HTTP handler."""
    query_serializer = DashboardQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    try:
        summary = DashboardQueries.monthly_summary(month=params['month'], year=params['year'])
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(DashboardResponseSerializer(summary).data)
