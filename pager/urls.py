from django.urls import path, include
from . import views

app_name = "pager"

urlpatterns = [
    # API
    path("api/", include(("pager.api_urls", "pager_api"), namespace="pager_api")),

    # Демо-страница
    path("demo/", views.PagerDemoView.as_view(), name="demo"),
]
