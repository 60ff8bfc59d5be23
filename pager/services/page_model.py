# PGN/pager/services/page_model.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from pager.errors import InvalidArgument

logger = logging.getLogger(__name__)

NUM_PLACEHOLDER = "(:num)"  # токен номера страницы в url_pattern
ELLIPSIS = "..."            # маркер пропущенных страниц
MIN_PAGES_TO_SHOW = 3       # первая + текущая + последняя


@dataclass(frozen=True)
class PageEntry:
    """Одна позиция окна пагинации: номер страницы или многоточие."""

    number: Union[int, str]
    url: Optional[str] = None
    is_current: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.number == ELLIPSIS

    def to_dict(self) -> Dict[str, Any]:
        return {"num": self.number, "url": self.url, "is_current": self.is_current}


class PageModel:
    """Параметры пагинации и вычисление видимого окна страниц.

    Parameters
    ----------
    total_items : int
        Общее число элементов.
    items_per_page : int
        Элементов на странице; 0 означает «страниц нет».
    current_page : int
        Текущая страница (1-based), диапазон не проверяется.
    url_pattern : str, optional
        URL страницы с плейсхолдером ``(:num)``, например ``'/foo/page/(:num)'``.
    outer_classes : Iterable[str], optional
        Дополнительные классы для обёртки ``<ul>``.
    inner_classes : Iterable[str], optional
        Дополнительные классы для элементов ``<li>``.

    Мутаторы ``set_*`` возвращают self, поэтому их можно вызывать цепочкой.
    """

    def __init__(
        self,
        total_items: int,
        items_per_page: int,
        current_page: int,
        url_pattern: str = "",
        outer_classes: Optional[Iterable[str]] = None,
        inner_classes: Optional[Iterable[str]] = None,
    ) -> None:
        self._total_items = total_items
        self._items_per_page = items_per_page
        self._num_pages = 0
        self.current_page = current_page
        self.url_pattern = url_pattern
        self.outer_classes: List[str] = list(outer_classes or [])
        self.inner_classes: List[str] = list(inner_classes or [])
        self._max_pages_to_show = 10
        self.previous_label = "Previous"
        self.next_label = "Next"

        self._update_num_pages()

    def __repr__(self) -> str:
        return (
            f"PageModel(total_items={self._total_items}, items_per_page={self._items_per_page}, "
            f"current_page={self.current_page}, num_pages={self._num_pages})"
        )

    def _update_num_pages(self) -> None:
        if self._items_per_page > 0:
            # целочисленный ceil без float
            self._num_pages = -(-self._total_items // self._items_per_page)
        else:
            self._num_pages = 0

    # --- Поля ----------------------------------------------------------------

    @property
    def total_items(self) -> int:
        return self._total_items

    @total_items.setter
    def total_items(self, value: int) -> None:
        self.set_total_items(value)

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @items_per_page.setter
    def items_per_page(self, value: int) -> None:
        self.set_items_per_page(value)

    @property
    def num_pages(self) -> int:
        return self._num_pages

    @property
    def max_pages_to_show(self) -> int:
        return self._max_pages_to_show

    @max_pages_to_show.setter
    def max_pages_to_show(self, value: int) -> None:
        self.set_max_pages_to_show(value)

    # --- Мутаторы ------------------------------------------------------------

    def set_max_pages_to_show(self, max_pages_to_show: int) -> "PageModel":
        if max_pages_to_show < MIN_PAGES_TO_SHOW:
            logger.warning("Rejected max_pages_to_show=%s", max_pages_to_show)
            raise InvalidArgument(f"max_pages_to_show cannot be less than {MIN_PAGES_TO_SHOW}.")
        self._max_pages_to_show = max_pages_to_show
        return self

    def set_items_per_page(self, items_per_page: int) -> "PageModel":
        self._items_per_page = items_per_page
        self._update_num_pages()
        return self

    def set_total_items(self, total_items: int) -> "PageModel":
        self._total_items = total_items
        self._update_num_pages()
        return self

    def set_current_page(self, current_page: int) -> "PageModel":
        self.current_page = current_page
        return self

    def set_url_pattern(self, url_pattern: str) -> "PageModel":
        self.url_pattern = url_pattern
        return self

    def set_previous_label(self, text: str) -> "PageModel":
        self.previous_label = text
        return self

    def set_next_label(self, text: str) -> "PageModel":
        self.next_label = text
        return self

    # --- Навигация -----------------------------------------------------------

    def page_url(self, page_num: int) -> str:
        # Чистая текстовая подстановка: все вхождения, без кодирования и проверок
        return self.url_pattern.replace(NUM_PLACEHOLDER, str(page_num))

    def next_page(self) -> Optional[int]:
        if self.current_page < self._num_pages:
            return self.current_page + 1
        return None

    def prev_page(self) -> Optional[int]:
        if self.current_page > 1:
            return self.current_page - 1
        return None

    def next_url(self) -> Optional[str]:
        page = self.next_page()
        return self.page_url(page) if page is not None else None

    def prev_url(self) -> Optional[str]:
        page = self.prev_page()
        return self.page_url(page) if page is not None else None

    def current_page_first_item(self) -> Optional[int]:
        first = (self.current_page - 1) * self._items_per_page + 1
        if first > self._total_items:
            return None
        return first

    def current_page_last_item(self) -> Optional[int]:
        first = self.current_page_first_item()
        if first is None:
            return None
        return min(first + self._items_per_page - 1, self._total_items)

    # --- Окно страниц --------------------------------------------------------

    def _page(self, page_num: int) -> PageEntry:
        return PageEntry(page_num, self.page_url(page_num), page_num == self.current_page)

    def compute_window(self) -> List[PageEntry]:
        """Возвращает упорядоченный список страниц (и многоточий) для отображения.

        Если страниц больше, чем max_pages_to_show, первая и последняя страницы
        показываются всегда, а между ними — скользящее окно вокруг текущей.
        Разрыв ровно в одну страницу тоже схлопывается в многоточие.
        """
        num_pages = self._num_pages
        max_pages = self._max_pages_to_show

        if num_pages <= 1:
            return []

        if num_pages <= max_pages:
            return [self._page(i) for i in range(1, num_pages + 1)]

        # Скользящее окно, центрированное на текущей странице
        num_adjacent = (max_pages - 3) // 2

        if self.current_page + num_adjacent > num_pages:
            window_start = num_pages - max_pages + 2
        else:
            window_start = self.current_page - num_adjacent
        window_start = max(window_start, 2)

        window_end = min(window_start + max_pages - 3, num_pages - 1)

        pages: List[PageEntry] = [self._page(1)]
        if window_start > 2:
            pages.append(PageEntry(ELLIPSIS))
        pages.extend(self._page(i) for i in range(window_start, window_end + 1))
        if window_end < num_pages - 1:
            pages.append(PageEntry(ELLIPSIS))
        pages.append(self._page(num_pages))

        logger.debug("Window for page %s of %s: %s..%s", self.current_page, num_pages, window_start, window_end)
        return pages

    # --- Разметка ------------------------------------------------------------

    def to_html(self) -> str:
        from pager.services.renderer import render  # renderer импортирует этот модуль

        return render(self)

    def __html__(self) -> str:
        return self.to_html()

    def __str__(self) -> str:
        return self.to_html()
