# PGN/pager/services/renderer.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PGN/pager/services/renderer.py
# Назначение: превращает окно страниц в список навигационных элементов
#             и сериализует его в HTML (экранирование — через django.utils.html)
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, List, Optional

from django.utils.html import format_html, format_html_join  # безопасная сборка HTML
from django.utils.safestring import SafeString, mark_safe

from pager.conf import get_setting
from pager.services.page_model import PageEntry, PageModel

KIND_PREV = "prev"
KIND_PAGE = "page"
KIND_ELLIPSIS = "ellipsis"
KIND_NEXT = "next"


@dataclass(frozen=True)
class NavEntry:
    """Элемент навигации: ссылка «назад/вперёд», номер страницы или многоточие."""

    kind: str
    text: str
    url: Optional[str] = None
    is_current: bool = False
    is_disabled: bool = False


@dataclass(frozen=True)
class PagerCss:
    """Имена CSS-классов разметки (по умолчанию — как в Bootstrap 4)."""

    container: str = "pagination"
    item: str = "page-item"
    link: str = "page-link"
    active: str = "active"
    disabled: str = "disabled"
    sr_only: str = "sr-only"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PagerCss":
        """Собирает набор классов из словаря, неизвестные ключи игнорируются."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})


def _classes(*parts: Iterable[str]) -> str:
    # склеиваем непустые классы через пробел
    return " ".join(c for group in parts for c in group if c)


def _page_entry(entry: PageEntry) -> NavEntry:
    if entry.is_ellipsis:
        return NavEntry(KIND_ELLIPSIS, str(entry.number), is_disabled=True)
    return NavEntry(KIND_PAGE, str(entry.number), entry.url, is_current=entry.is_current)


def build_entries(model: PageModel, show_disabled_nav: bool = False) -> List[NavEntry]:
    """
    Строит упорядоченный список: [назад] + окно страниц + [вперёд].

    Недоступные «назад/вперёд» пропускаются либо, при show_disabled_nav=True,
    попадают в список как неактивные элементы без ссылки.
    """
    window = model.compute_window()
    if not window:
        return []

    entries: List[NavEntry] = []

    prev_url = model.prev_url()
    if prev_url is not None:
        entries.append(NavEntry(KIND_PREV, model.previous_label, prev_url))
    elif show_disabled_nav:
        entries.append(NavEntry(KIND_PREV, model.previous_label, is_disabled=True))

    entries.extend(_page_entry(p) for p in window)

    next_url = model.next_url()
    if next_url is not None:
        entries.append(NavEntry(KIND_NEXT, model.next_label, next_url))
    elif show_disabled_nav:
        entries.append(NavEntry(KIND_NEXT, model.next_label, is_disabled=True))

    return entries


def _render_entry(entry: NavEntry, item_class: str, css: PagerCss) -> SafeString:
    if entry.is_disabled or entry.url is None:
        return format_html(
            '<li class="{}"><span>{}</span></li>',
            _classes([item_class, css.disabled]),
            entry.text,
        )

    if entry.kind in (KIND_PREV, KIND_NEXT):
        arrow = mark_safe("&laquo;" if entry.kind == KIND_PREV else "&raquo;")
        return format_html(
            '<li class="{}"><a class="{}" href="{}" aria-label="{}">'
            '<span aria-hidden="true">{}</span><span class="{}">{}</span></a></li>',
            item_class, css.link, entry.url, entry.text, arrow, css.sr_only, entry.text,
        )

    li_class = _classes([item_class, css.active if entry.is_current else ""])
    return format_html(
        '<li class="{}"><a class="{}" href="{}">{}</a></li>',
        li_class, css.link, entry.url, entry.text,
    )


def render_html(
    entries: List[NavEntry],
    outer_classes: Iterable[str] = (),
    inner_classes: Iterable[str] = (),
    css: Optional[PagerCss] = None,
) -> SafeString:
    """Сериализует список элементов в ``<ul>``; пустой список — пустая строка."""
    if not entries:
        return mark_safe("")

    css = css or PagerCss()
    item_class = _classes([css.item], inner_classes)
    items = format_html_join("", "{}", ((_render_entry(e, item_class, css),) for e in entries))
    return format_html(
        '<ul class="{}">{}</ul>',
        _classes([css.container], outer_classes),
        items,
    )


def render_text(entries: List[NavEntry]) -> str:
    """Текстовое представление окна: ``1 ... 49 [50] 51 ... 100``."""
    parts = []
    for e in entries:
        if e.kind == KIND_PAGE and e.is_current:
            parts.append(f"[{e.text}]")
        elif e.kind == KIND_PREV:
            parts.append(f"« {e.text}")
        elif e.kind == KIND_NEXT:
            parts.append(f"{e.text} »")
        else:
            parts.append(e.text)
    return " ".join(parts)


def render(
    model: PageModel,
    css: Optional[PagerCss] = None,
    show_disabled_nav: Optional[bool] = None,
) -> SafeString:
    """Рендер модели в HTML с настройками из settings.PAGER по умолчанию."""
    if css is None:
        css = PagerCss.from_dict(get_setting("CSS"))
    if show_disabled_nav is None:
        show_disabled_nav = bool(get_setting("SHOW_DISABLED_NAV"))
    entries = build_entries(model, show_disabled_nav=show_disabled_nav)
    return render_html(entries, model.outer_classes, model.inner_classes, css)
