from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules: internal RPC surface
    path("", include("modules.products.urls")),
]
