# config/tests.py
import os
from unittest import mock

from django.conf import settings
from django.test import SimpleTestCase

from config.env_config import get_env_variable


class EnvConfigTest(SimpleTestCase):
    def test_missing_variable_returns_default(self):
        """Тест значения по умолчанию"""
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_env_variable('LOG_LEVEL', 'INFO'), 'INFO')
            self.assertIsNone(get_env_variable('LOG_LEVEL'))

    def test_bool_cast(self):
        """Тест приведения к bool"""
        for raw, expected in (('true', True), ('1', True), ('Yes', True), ('off', False), ('0', False)):
            with mock.patch.dict(os.environ, {'DEBUG': raw}):
                self.assertIs(get_env_variable('DEBUG', True, bool), expected)

    def test_list_cast(self):
        """Тест приведения строки через запятую к списку"""
        with mock.patch.dict(os.environ, {'ALLOWED_HOSTS': 'a.example, b.example,,'}):
            self.assertEqual(get_env_variable('ALLOWED_HOSTS', [], list), ['a.example', 'b.example'])

    def test_invalid_cast_returns_default(self):
        """Тест ошибки приведения типа"""
        with mock.patch.dict(os.environ, {'PORT': 'abc'}):
            self.assertEqual(get_env_variable('PORT', 8000, int), 8000)


class SettingsTest(SimpleTestCase):
    def test_app_installed(self):
        """Тест регистрации приложения"""
        self.assertIn('apps.registry.national_ids', settings.INSTALLED_APPS)
        self.assertIn('rest_framework', settings.INSTALLED_APPS)

    def test_logging_configured(self):
        """Тест конфигурации логгера приложения"""
        self.assertIn('apps', settings.LOGGING['loggers'])

    def test_rest_framework_settings(self):
        """Тест настроек DRF: только JSON-рендерер"""
        self.assertEqual(settings.REST_FRAMEWORK, {
            'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
        })
