# PGN/PGN/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PGN/PGN/settings.py
# Назначение: глобальные настройки проекта Django + настройки пагинатора (PAGER)
# Принципы: секреты и флаги берём из .env, всё остальное — безопасные дефолты
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения и работы с ОС
from dotenv import load_dotenv  # загрузка значений из .env

# BASE_DIR — корень проекта. Используем для формирования других путей.
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Флаг режима разработки. В продакшене должен быть False (DJANGO_DEBUG=0).
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

# Секретный ключ берём из переменной окружения KEY_DJ
SECRET_KEY = os.getenv("KEY_DJ")

# Без ключа работаем только в Dev; в проде сразу падаем с понятной ошибкой
if not SECRET_KEY:
    if not DEBUG:
        raise ValueError("❌ SECRET_KEY не найден в .env! Установите KEY_DJ.")
    SECRET_KEY = "dev-insecure-key"

# Список разрешённых хостов. В Dev можно оставить пустым, в проде — обязательно заполнить.
ALLOWED_HOSTS: list[str] = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if h]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.contenttypes",     # контент-тайпы (нужны DRF)
    "django.contrib.auth",             # система аутентификации (нужна DRF)
    "django.contrib.staticfiles",      # работа со статикой
    "rest_framework",                  # DRF — API фреймворк
    "pager.apps.PagerConfig",          # приложение пагинации
]

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.middleware.common.CommonMiddleware",            # общие улучшения (ETag и пр.)
    "django.middleware.clickjacking.XFrameOptionsMiddleware",   # защита от clickjacking
]

# ── Урлы и WSGI ──────────────────────────────────────────────────────────────

ROOT_URLCONF = "PGN.urls"              # корневой файл с маршрутами

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",  # бэкенд движка шаблонов
        "DIRS": [BASE_DIR / "templates"],  # дополнительная папка с шаблонами проекта
        "APP_DIRS": True,                  # включаем поиск шаблонов в приложениях
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # добавляет request в контекст
            ],
        },
    },
]

WSGI_APPLICATION = "PGN.wsgi.application"  # точка входа WSGI-сервера

# ── База данных ──────────────────────────────────────────────────────────────
# Пагинатор ничего не хранит; SQLite нужен только contrib-приложениям.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",    # движок БД
        "NAME": BASE_DIR / "db.sqlite3",           # путь до файла SQLite
    }
}

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = "ru-ru"       # язык интерфейса
TIME_ZONE = "Europe/Moscow"   # часовой пояс проекта
USE_I18N = True
USE_TZ = True

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"                 # URL-префикс для статики

# ── DRF: базовые безопасные настройки ────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",  # JSON рендерер
        "rest_framework.renderers.BrowsableAPIRenderer",  # удобно при разработке
    ],
}

# ── Пагинатор: значения по умолчанию (см. pager/conf.py) ────────────────────
PAGER = {
    "MAX_PAGES_TO_SHOW": int(os.getenv("PAGER_MAX_PAGES_TO_SHOW", "10")),  # ширина окна (>= 3)
    "PREVIOUS_LABEL": "Previous",      # текст «назад» (aria-label и sr-only)
    "NEXT_LABEL": "Next",              # текст «вперёд»
    "SHOW_DISABLED_NAV": False,        # рисовать неактивные «назад/вперёд» на краях
    "URL_PATTERN": "?page=(:num)",     # шаблон URL страницы
    "CSS": {},                         # переопределения классов, например {"sr_only": "visually-hidden"}
}

# ── Логирование ─────────────────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "pager": {
            "handlers": ["console"],
            "level": os.getenv("DJANGO_LOG_LEVEL", "INFO"),
        },
    },
}
