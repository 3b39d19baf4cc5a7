from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import mixins, status, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.common.serializers import DeleteConfirmSerializer, confirm_from_request
from apps.common.filters import period_lookups
from .exceptions import ExpenseServiceError
from .models import Expense
from .serializers import ExpenseCreateSerializer, ExpenseFilterSerializer, ExpenseSerializer
from .services import ExpenseService


class ExpensePagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


@extend_schema_view(
    list=extend_schema(parameters=[ExpenseFilterSerializer], tags=['expenses']),
    create=extend_schema(
        request=ExpenseCreateSerializer, responses={201: ExpenseSerializer}, tags=['expenses']
    ),
    retrieve=extend_schema(tags=['expenses']),
    destroy=extend_schema(parameters=[DeleteConfirmSerializer], tags=['expenses']),
)
class ExpenseViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for shop expenses.

    list: Expenses of the current IST month or a custom range
    create: Record an expense
    retrieve: Get a specific expense
    destroy: Delete an expense (requires confirm=DELETE)
    """

    queryset = Expense.objects.all()
    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = ExpensePagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = ExpenseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return queryset.filter(**period_lookups(filter_serializer.validated_data))

    def get_serializer_class(self):
        if self.action == 'create':
            return ExpenseCreateSerializer
        return ExpenseSerializer

    def create(self, request, *args, **kwargs):
        input_serializer = self.get_serializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)
        data = input_serializer.validated_data

        try:
            expense = ExpenseService.create_expense(
                expense_type=data['type'],
                amount=data['amount'],
                gst=data.get('gst'),
                description=data.get('description', ''),
            )
        except ExpenseServiceError as e:
            raise ValidationError({'detail': str(e)})

        return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        expense = self.get_object()

        confirm_serializer = DeleteConfirmSerializer(data={
            'confirm': confirm_from_request(request)
        })
        confirm_serializer.is_valid(raise_exception=True)

        ExpenseService.delete_expense(expense, confirm=confirm_serializer.validated_data['confirm'])
        return Response(status=status.HTTP_204_NO_CONTENT)
