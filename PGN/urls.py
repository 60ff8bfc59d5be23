# PGN/PGN/urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PGN/PGN/urls.py
# Назначение: корневые URL-маршруты проекта
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path, include       # функции для описания маршрутов

urlpatterns = [
    path("", include(("pager.urls", "pager"), namespace="pager")),  # маршруты приложения пагинации
]
