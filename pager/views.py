# PGN/pager/views.py
from typing import Any, Dict, Optional

from django.views.generic import TemplateView

from pager.conf import get_setting
from pager.errors import InvalidArgument
from pager.services.page_model import PageModel


def _int_param(request, name: str, default: int, minimum: Optional[int] = None) -> int:
    # безопасно парсим целое из GET, при ошибке — дефолт
    raw = (request.GET.get(name) or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


class PagerDemoView(TemplateView):
    """
    Демо-страница: рисует пагинатор по параметрам GET.
    Параметры: total, per, page, max — как в API, но без ошибок валидации
    (невалидные значения заменяются дефолтами).
    """
    template_name = "pager/demo.html"

    def get_context_data(self, **kwargs) -> Dict[str, Any]:
        ctx = super().get_context_data(**kwargs)
        request = self.request

        total = _int_param(request, "total", 0, minimum=0)
        per = _int_param(request, "per", 10, minimum=0)
        page = _int_param(request, "page", 1)
        max_pages = _int_param(request, "max", get_setting("MAX_PAGES_TO_SHOW"))

        model = PageModel(total, per, page, get_setting("URL_PATTERN"))
        model.set_previous_label(get_setting("PREVIOUS_LABEL")).set_next_label(get_setting("NEXT_LABEL"))
        try:
            model.set_max_pages_to_show(max_pages)
        except InvalidArgument:
            pass  # оставляем ширину окна по умолчанию

        ctx.update({
            "title": "Пагинация",
            "pager": model,
            "first_item": model.current_page_first_item(),
            "last_item": model.current_page_last_item(),
        })
        return ctx
