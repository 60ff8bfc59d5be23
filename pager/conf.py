# PGN/pager/conf.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PGN/pager/conf.py
# Назначение: настройки пагинатора по умолчанию + чтение словаря PAGER из settings
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from typing import Any, Dict

from django.conf import settings  # доступ к настройкам проекта

# Значения по умолчанию (их можно переопределить через settings.PAGER)
DEFAULTS: Dict[str, Any] = {
    "MAX_PAGES_TO_SHOW": 10,          # ширина окна страниц
    "PREVIOUS_LABEL": "Previous",     # текст ссылки «назад»
    "NEXT_LABEL": "Next",             # текст ссылки «вперёд»
    "SHOW_DISABLED_NAV": False,       # рисовать ли неактивные «назад/вперёд»
    "URL_PATTERN": "?page=(:num)",    # шаблон URL страницы для тегов и API
    "CSS": {},                        # переопределения классов PagerCss
}


def get_setting(name: str) -> Any:
    """Возвращает значение из settings.PAGER, а при его отсутствии — дефолт."""
    user_conf = getattr(settings, "PAGER", None) or {}
    if name in user_conf:
        return user_conf[name]
    return DEFAULTS[name]
