# PGN/pager/tests/conftest.py
import pytest
from rest_framework.test import APIClient

from pager.services.page_model import PageModel


@pytest.fixture
def api_client() -> APIClient:
    """DRF-клиент без авторизации (API публичное)."""
    return APIClient()


@pytest.fixture
def big_model() -> PageModel:
    """100 страниц по 10 элементов, текущая — 50-я."""
    return PageModel(1000, 10, 50, "/p/(:num)")


@pytest.fixture
def small_model() -> PageModel:
    """3 страницы, текущая — 2-я."""
    return PageModel(30, 10, 2, "/p/(:num)")