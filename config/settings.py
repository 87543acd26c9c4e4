from pathlib import Path
from .env_config import get_env_variable

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent


# =============================================================================
# БАЗОВЫЕ НАСТРОЙКИ ПРОЕКТА
# =============================================================================

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = get_env_variable('SECRET_KEY', 'django-insecure-national-ids-dev-only-key')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = get_env_variable('DEBUG', True, bool)

ALLOWED_HOSTS = get_env_variable('ALLOWED_HOSTS', ['localhost', '127.0.0.1', 'testserver'], list)


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПРИЛОЖЕНИЙ
# =============================================================================

INSTALLED_APPS = [
    # Django core
    "django.contrib.auth",
    "django.contrib.contenttypes",

    # Third-party packages
    "rest_framework",

    # Local apps
    "apps.registry.national_ids",
]


# =============================================================================
# НАСТРОЙКИ БАЗЫ ДАННЫХ
# =============================================================================

# Валидаторы с БД не работают; sqlite нужен только Django
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}


# =============================================================================
# ЛОКАЛИЗАЦИЯ И ВРЕМЯ
# =============================================================================

# Сообщения об ошибках только на английском, переводов нет
LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Riyadh"
USE_I18N = True
USE_TZ = True


# =============================================================================
# НАСТРОЙКИ DRF (DJANGO REST FRAMEWORK)
# =============================================================================

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        'rest_framework.renderers.JSONRenderer',
    ],
}


# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================

LOG_LEVEL = get_env_variable('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
        },
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
