from django import template

from pager.conf import get_setting
from pager.services.page_model import PageModel
from pager.services.renderer import render

register = template.Library()


def _model(total, per_page, current, url_pattern=None, max_pages=None):
    model = PageModel(int(total), int(per_page), int(current), url_pattern or get_setting("URL_PATTERN"))
    model.set_max_pages_to_show(int(max_pages if max_pages is not None else get_setting("MAX_PAGES_TO_SHOW")))
    model.set_previous_label(get_setting("PREVIOUS_LABEL")).set_next_label(get_setting("NEXT_LABEL"))
    return model


@register.simple_tag
def page_window(page_obj, window=None, url_pattern=None):
    """
    Возвращает окно страниц для django.core.paginator.Page
    (список словарей num/url/is_current, '...' на месте пропусков).
    Использование в шаблоне:
      {% load pager_extras %}
      {% page_window page_obj 7 as pages %}
    """
    paginator = page_obj.paginator
    model = _model(paginator.count, paginator.per_page, page_obj.number, url_pattern, window)
    return [p.to_dict() for p in model.compute_window()]


@register.simple_tag
def pager_html(total, per_page, current, url_pattern=None, window=None):
    """Готовая разметка пагинатора: {% pager_html 1000 10 50 "/p/(:num)" %}."""
    return render(_model(total, per_page, current, url_pattern, window))
