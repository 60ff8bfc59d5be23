# PGN/pager/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PGN/pager/api_views.py
# Назначение: DRF-представления: окно пагинации в JSON и готовая HTML-разметка
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations  # поддержка современных аннотаций

import logging
from typing import Any

from rest_framework import status  # HTTP-статусы
from rest_framework.response import Response  # DRF-ответ
from rest_framework.views import APIView  # базовый API-класс

from pager.errors import InvalidArgument
from pager.serializers import PaginationQuerySerializer, PaginationSummarySerializer
from pager.services.renderer import render

logger = logging.getLogger(__name__)


class PageWindowAPIView(APIView):
    """
    Отдаёт окно пагинации в JSON.
    Параметры (GET):
      - total: всего элементов (>= 0)
      - per: элементов на странице (>= 0, 0 — страниц нет)
      - page: текущая страница
      - max: ширина окна (>= 3), по умолчанию из settings.PAGER
      - pattern: шаблон URL с (:num)
    """
    authentication_classes: list = []  # ручка публичная, сессия не нужна
    permission_classes: list = []

    def get_model(self, request):
        query = PaginationQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)  # 400 с описанием ошибок полей
        return query.build_model()

    def get(self, request, *args: Any, **kwargs: Any) -> Response:
        try:
            model = self.get_model(request)
        except InvalidArgument as exc:
            # например, PAGER["MAX_PAGES_TO_SHOW"] < 3 в настройках
            logger.warning("Pagination request rejected: %s", exc)
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(self.serialize(model))

    def serialize(self, model) -> dict:
        return PaginationSummarySerializer(model).data


class PageWindowHtmlAPIView(PageWindowAPIView):
    """То же окно, но в виде готовой HTML-разметки: {"html": "<ul ...>"}."""

    def serialize(self, model) -> dict:
        return {"html": str(render(model))}
