from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'bills'

router = DefaultRouter()
router.register(r'purchase', views.PurchaseBillViewSet, basename='purchase-bill')
router.register(r'sell', views.SellBillViewSet, basename='sell-bill')

urlpatterns = [
    # GET    /api/bills/purchase/                - List purchase bills
    # POST   /api/bills/purchase/                - Create purchase bill
    # GET    /api/bills/purchase/{id}/           - Get purchase bill
    # DELETE /api/bills/purchase/{id}/           - Delete (confirm=DELETE)
    # GET    /api/bills/purchase/{id}/invoice/   - Printable invoice
    # Same routes under /api/bills/sell/
    path('', include(router.urls)),
]
