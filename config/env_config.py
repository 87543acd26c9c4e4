# config/env_config.py
import os
from dotenv import load_dotenv

# Переменные окружения из .env (если файл есть)
load_dotenv()

_TRUE_VALUES = ('true', '1', 'yes', 'on')


def get_env_variable(var_name, default_value=None, cast_type=None):
    """
    Значение переменной окружения с приведением типа.

    cast_type: bool, int, list (строка через запятую) или любой callable.
    При ошибке приведения возвращается default_value.
    """
    value = os.environ.get(var_name)
    if value is None:
        return default_value

    if cast_type is None:
        return value
    if cast_type is bool:
        return str(value).strip().lower() in _TRUE_VALUES
    if cast_type is list:
        return [item.strip() for item in str(value).split(',') if item.strip()]
    try:
        return cast_type(value)
    except (ValueError, TypeError):
        return default_value
