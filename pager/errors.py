# PGN/pager/errors.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PGN/pager/errors.py
# Назначение: исключения приложения pager
# ─────────────────────────────────────────────────────────────────────────────


class PagerError(Exception):
    """Базовое исключение пагинатора."""


class InvalidArgument(PagerError, ValueError):
    """Недопустимый аргумент (например, max_pages_to_show < 3)."""
