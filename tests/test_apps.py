import logging

from django.apps import apps
from django.test import override_settings


def test_app_is_registered():
    app_config = apps.get_app_config("zenopay")
    assert app_config.verbose_name == "ZenoPay Payments"


def test_ready_warns_without_api_key(caplog):
    app_config = apps.get_app_config("zenopay")
    with override_settings(ZENOPAY_API_KEY=""):
        with caplog.at_level(logging.WARNING, logger="zenopay.apps"):
            app_config.ready()
    assert "ZENOPAY_API_KEY is not set" in caplog.text
