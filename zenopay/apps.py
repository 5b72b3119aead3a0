import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class ZenoPayAppConfig(AppConfig):
    name = 'zenopay'
    verbose_name = 'ZenoPay Payments'

    def ready(self):
        if not getattr(settings, 'ZENOPAY_API_KEY', ''):
            logger.warning(
                "ZENOPAY_API_KEY is not set. ZenoPay requests will fail "
                "unless a ZenoPayConfig with an api_key is passed explicitly."
            )
