# PGN/pager/tests/test_page_model.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: расчёт числа страниц, соседних страниц, диапазона элементов и окна
# ─────────────────────────────────────────────────────────────────────────────

import logging

import pytest

from pager.errors import InvalidArgument
from pager.services.page_model import ELLIPSIS, PageEntry, PageModel

E = ELLIPSIS


def _numbers(model):
    return [p.number for p in model.compute_window()]


# ---------- ЧИСЛО СТРАНИЦ ----------

@pytest.mark.parametrize(
    "total, per, expected",
    [
        (0, 10, 0),
        (1, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (52, 10, 6),
        (1000, 10, 100),
        (1001, 10, 101),
        (5, 0, 0),   # 0 на странице — страниц нет
    ],
)
def test_num_pages(total, per, expected):
    assert PageModel(total, per, 1).num_pages == expected


def test_num_pages_follows_setters():
    model = PageModel(100, 10, 1)
    assert model.num_pages == 10

    model.set_items_per_page(25)
    assert model.num_pages == 4

    model.set_total_items(101)
    assert model.num_pages == 5

    # property-сеттеры пересчитывают так же, как set_*
    model.items_per_page = 0
    assert model.num_pages == 0
    model.items_per_page = 50
    model.total_items = 49
    assert model.num_pages == 1


def test_setters_chain():
    model = (
        PageModel(0, 10, 1)
        .set_total_items(200)
        .set_current_page(3)
        .set_url_pattern("/x/(:num)")
        .set_max_pages_to_show(5)
        .set_previous_label("Назад")
        .set_next_label("Вперёд")
    )
    assert model.num_pages == 20
    assert model.current_page == 3
    assert model.max_pages_to_show == 5
    assert model.previous_label == "Назад"
    assert model.next_label == "Вперёд"
    assert model.page_url(4) == "/x/4"


def test_defaults():
    model = PageModel(10, 5, 1)
    assert model.max_pages_to_show == 10
    assert model.previous_label == "Previous"
    assert model.next_label == "Next"
    assert model.url_pattern == ""
    assert model.outer_classes == [] and model.inner_classes == []


# ---------- max_pages_to_show ----------

def test_max_pages_to_show_validation(caplog):
    model = PageModel(100, 10, 1)
    with caplog.at_level(logging.WARNING, logger="pager"):
        with pytest.raises(InvalidArgument):
            model.set_max_pages_to_show(2)
    # состояние не изменилось
    assert model.max_pages_to_show == 10
    assert "max_pages_to_show=2" in caplog.text

    model.set_max_pages_to_show(3)
    assert model.max_pages_to_show == 3


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        PageModel(100, 10, 1).max_pages_to_show = 0


# ---------- URL ----------

def test_page_url_substitution():
    assert PageModel(0, 10, 1, "/p/(:num)").page_url(5) == "/p/5"


def test_page_url_replaces_every_placeholder_without_range_check():
    model = PageModel(10, 10, 1, "/p/(:num)?again=(:num)")
    assert model.page_url(999) == "/p/999?again=999"


def test_page_url_without_placeholder():
    assert PageModel(10, 10, 1, "/static").page_url(3) == "/static"


# ---------- СОСЕДНИЕ СТРАНИЦЫ ----------

def test_first_page_neighbours():
    model = PageModel(52, 10, 1, "/p/(:num)")
    assert model.num_pages == 6
    assert model.prev_page() is None
    assert model.prev_url() is None
    assert model.next_page() == 2
    assert model.next_url() == "/p/2"


def test_last_page_neighbours():
    model = PageModel(52, 10, 6, "/p/(:num)")
    assert model.next_page() is None
    assert model.next_url() is None
    assert model.prev_page() == 5
    assert model.prev_url() == "/p/5"


def test_out_of_range_current_page_does_not_raise():
    model = PageModel(52, 10, 40)
    assert model.next_page() is None
    assert model.prev_page() == 39  # без «зажима» текущей страницы
    assert model.current_page_first_item() is None
    assert model.current_page_last_item() is None


# ---------- ДИАПАЗОН ЭЛЕМЕНТОВ ----------

@pytest.mark.parametrize(
    "total, per, page, first, last",
    [
        (25, 10, 1, 1, 10),
        (25, 10, 2, 11, 20),
        (25, 10, 3, 21, 25),     # последняя страница обрезается по total
        (25, 10, 4, None, None),
        (0, 10, 1, None, None),
    ],
)
def test_current_page_items(total, per, page, first, last):
    model = PageModel(total, per, page)
    assert model.current_page_first_item() == first
    assert model.current_page_last_item() == last


# ---------- ОКНО СТРАНИЦ ----------

@pytest.mark.parametrize("total, per", [(0, 10), (10, 10), (5, 0), (1, 1)])
def test_window_empty_for_single_page(total, per):
    assert PageModel(total, per, 1).compute_window() == []


def test_window_all_pages_when_they_fit():
    model = PageModel(52, 10, 1, "/p/(:num)")
    pages = model.compute_window()
    assert _numbers(model) == [1, 2, 3, 4, 5, 6]
    assert [p.is_current for p in pages] == [True, False, False, False, False, False]
    assert pages[2] == PageEntry(3, "/p/3", False)


def test_window_exactly_max_pages():
    model = PageModel(100, 10, 7)
    assert _numbers(model) == list(range(1, 11))
    assert [p.number for p in model.compute_window() if p.is_current] == [7]


def test_window_centered(big_model):
    pages = big_model.compute_window()
    assert _numbers(big_model) == [1, E, 47, 48, 49, 50, 51, 52, 53, 54, E, 100]
    assert [p.number for p in pages if p.is_current] == [50]
    assert pages[1].url is None and pages[1].is_ellipsis
    assert pages[-1] == PageEntry(100, "/p/100", False)


@pytest.mark.parametrize(
    "current, expected",
    [
        (1, [1, 2, 3, 4, 5, 6, 7, 8, 9, E, 100]),
        (5, [1, 2, 3, 4, 5, 6, 7, 8, 9, E, 100]),
        # разрыв ровно в одну страницу (2) всё равно отображается многоточием
        (6, [1, E, 3, 4, 5, 6, 7, 8, 9, 10, E, 100]),
        (95, [1, E, 92, 93, 94, 95, 96, 97, 98, 99, 100]),
        (97, [1, E, 94, 95, 96, 97, 98, 99, 100]),
        (98, [1, E, 92, 93, 94, 95, 96, 97, 98, 99, 100]),
        (100, [1, E, 92, 93, 94, 95, 96, 97, 98, 99, 100]),
    ],
)
def test_window_slides_near_edges(current, expected):
    model = PageModel(1000, 10, current)
    assert _numbers(model) == expected


def test_window_minimum_width():
    model = PageModel(100, 10, 5).set_max_pages_to_show(3)
    assert _numbers(model) == [1, E, 5, E, 10]


def test_window_even_width():
    model = PageModel(100, 10, 5).set_max_pages_to_show(6)
    # по одной соседней странице с каждой стороны, окно шириной 4
    assert _numbers(model) == [1, E, 4, 5, 6, 7, E, 10]


@pytest.mark.parametrize("max_pages", [3, 4, 5, 7, 10, 11])
def test_window_shape_invariants(max_pages):
    for current in range(1, 31):
        model = PageModel(300, 10, current).set_max_pages_to_show(max_pages)
        nums = _numbers(model)

        assert nums[0] == 1 and nums[-1] == 30
        pages = [n for n in nums if n != E]
        assert pages == sorted(set(pages))
        assert len(pages) <= max_pages
        assert nums.count(E) <= 2
        # max - 1 при сужении у правого края, max + 2 при двух многоточиях
        assert max_pages - 1 <= len(nums) <= max_pages + 2
        # никогда два многоточия подряд
        assert all(not (a == E and b == E) for a, b in zip(nums, nums[1:]))
        assert current in pages


def test_window_recomputed_after_mutation(big_model):
    before = big_model.compute_window()
    big_model.set_current_page(1)
    after = big_model.compute_window()
    assert before != after
    assert after[0].is_current


def test_page_entry_to_dict():
    assert PageEntry(3, "/p/3", True).to_dict() == {"num": 3, "url": "/p/3", "is_current": True}
    assert PageEntry(E).to_dict() == {"num": "...", "url": None, "is_current": False}
