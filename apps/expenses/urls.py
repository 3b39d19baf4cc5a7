from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'expenses'

router = SimpleRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/        - List expenses
    # POST   /api/expenses/        - Record expense
    # GET    /api/expenses/{id}/   - Get expense
    # DELETE /api/expenses/{id}/   - Delete (confirm=DELETE)
    path('', include(router.urls)),
]
