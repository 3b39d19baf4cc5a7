from django.conf import settings
from django.db.models import Q
from django.shortcuts import render
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.common.filters import period_lookups
from apps.common.finance import format_currency, to_decimal
from apps.common.ist import format_ist
from apps.common.serializers import DeleteConfirmSerializer, confirm_from_request
from .exceptions import BillNumberConflictError, BillServiceError
from .models import PurchaseBill, SellBill
from .serializers import (
    BillFilterSerializer,
    PurchaseBillCreateSerializer,
    PurchaseBillSerializer,
    SellBillCreateSerializer,
    SellBillSerializer,
)
from .services import BillService


class BillPagination(PageNumberPagination):
    """Pagination for bill lists."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class BaseBillViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    Bills are created, listed, retrieved and deleted; never updated.

    list: Bills of the current IST month, a custom range, or a search
    create: Price items and save a bill
    retrieve: Get a specific bill
    destroy: Delete a bill (requires confirm=DELETE)
    invoice: Printable HTML invoice
    """

    permission_classes = [IsAuthenticated]
    pagination_class = BillPagination
    create_serializer_class = None

    def get_queryset(self):
        """Filter lists using input serializer validation."""
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = BillFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        search = params.get('search')
        if search:
            # Search spans all dates
            match = (
                Q(customer__icontains=search) |
                Q(contact__icontains=search) |
                Q(description__icontains=search)
            )
            if search.isdigit():
                match |= Q(bill_number=int(search))
            return queryset.filter(match)

        return queryset.filter(**period_lookups(params))

    def get_serializer_class(self):
        if self.action == 'create':
            return self.create_serializer_class
        return self.serializer_class

    def save_bill(self, data):
        raise NotImplementedError

    def create(self, request, *args, **kwargs):
        input_serializer = self.get_serializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            bill = self.save_bill(input_serializer.validated_data)
        except BillNumberConflictError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except BillServiceError as e:
            raise ValidationError({'items': [str(e)]})

        return Response(self.serializer_class(bill).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        bill = self.get_object()

        confirm_serializer = DeleteConfirmSerializer(data={
            'confirm': confirm_from_request(request)
        })
        confirm_serializer.is_valid(raise_exception=True)

        BillService.delete_bill(bill, confirm=confirm_serializer.validated_data['confirm'])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={(200, 'text/html'): OpenApiTypes.STR})
    @action(detail=True, methods=['get'])
    def invoice(self, request, pk=None):
        """
        Printable invoice for a bill.

        GET /api/bills/{kind}/{id}/invoice/
        """
        bill = self.get_object()
        totals = bill.totals()
        items = [
            {
                'metal': item.get('metal') or 'N/A',
                'rate': format_currency(item.get('rate')),
                'weight': to_decimal(item.get('weight')),
                'amount': format_currency(item.get('amount')),
            }
            for item in bill.items
        ]
        context = {
            'shop_name': settings.SHOP_NAME,
            'shop_contact': settings.SHOP_CONTACT,
            'title': bill.kind.label,
            'bill': bill,
            'created_at': format_ist(bill.created_at),
            'items': items,
            'taxable': format_currency(totals.taxable),
            'tax': format_currency(totals.tax),
            'grand_total': format_currency(totals.grand_total),
        }
        return render(request, 'bills/invoice.html', context)


@extend_schema_view(
    list=extend_schema(parameters=[BillFilterSerializer], tags=['bills']),
    create=extend_schema(
        request=PurchaseBillCreateSerializer, responses={201: PurchaseBillSerializer}, tags=['bills']
    ),
    retrieve=extend_schema(tags=['bills']),
    destroy=extend_schema(parameters=[DeleteConfirmSerializer], tags=['bills']),
    invoice=extend_schema(tags=['bills']),
)
class PurchaseBillViewSet(BaseBillViewSet):
    """Bills for metal bought from customers."""

    queryset = PurchaseBill.objects.all()
    serializer_class = PurchaseBillSerializer
    create_serializer_class = PurchaseBillCreateSerializer

    def save_bill(self, data):
        return BillService.create_purchase_bill(**data)


@extend_schema_view(
    list=extend_schema(parameters=[BillFilterSerializer], tags=['bills']),
    create=extend_schema(request=SellBillCreateSerializer, responses={201: SellBillSerializer}, tags=['bills']),
    retrieve=extend_schema(tags=['bills']),
    destroy=extend_schema(parameters=[DeleteConfirmSerializer], tags=['bills']),
    invoice=extend_schema(tags=['bills']),
)
class SellBillViewSet(BaseBillViewSet):
    """Bills for metal sold to customers."""

    queryset = SellBill.objects.all()
    serializer_class = SellBillSerializer
    create_serializer_class = SellBillCreateSerializer

    def save_bill(self, data):
        return BillService.create_sell_bill(**data)
