# PGN/pager/api_urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PGN/pager/api_urls.py
# Назначение: маршруты API пагинатора
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path  # импорт path для маршрутов

from . import api_views  # импорт API-представлений

urlpatterns = [
    path("window/",      api_views.PageWindowAPIView.as_view(),     name="window"),       # окно в JSON
    path("window/html/", api_views.PageWindowHtmlAPIView.as_view(), name="window_html"),  # окно в HTML
]
