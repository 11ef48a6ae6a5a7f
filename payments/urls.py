"""
URL configuration for payments app.

Defines API endpoints for:
- Listing registered gateways
- Processing a payment
"""

from django.urls import path

from .views import GatewayListView, ProcessPaymentView

urlpatterns = [
    path(
        'gateways/',
        GatewayListView.as_view(),
        name='payments-gateways'
    ),
    path(
        'process/',
        ProcessPaymentView.as_view(),
        name='payments-process'
    ),
]
