"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductRpcView

urlpatterns = [
    path("rpc/products", ProductRpcView.as_view(), name="product_rpc"),
]
