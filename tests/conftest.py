"""Pytest fixtures for ZenoPay client tests."""

import json

import django
import pytest
from django.conf import settings

if not settings.configured:
    settings.configure(
        INSTALLED_APPS=['zenopay'],
        ZENOPAY_API_KEY='settings-api-key',
        ZENOPAY_SECRET_KEY='settings-secret',
        ZENOPAY_ACCOUNT_ID='zp-account',
    )
    django.setup()

from zenopay.config import ZenoPayConfig  # noqa: E402
from zenopay.client import ZenoPay  # noqa: E402
from zenopay.utils.http_client import HTTPClient  # noqa: E402


class FakeResponse:
    def __init__(self, body, status_code=200):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode('utf-8')
        self.content = body
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session; records calls, returns canned bodies."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.error = None
        self.closed = False

    def respond(self, body, status_code=200):
        self.responses.append(FakeResponse(body, status_code))

    def request(self, method, url, headers=None, timeout=None, **kwargs):
        self.calls.append({
            'method': method,
            'url': url,
            'headers': headers,
            'timeout': timeout,
            **kwargs,
        })
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def config():
    return ZenoPayConfig(
        api_key='test-api-key',
        secret_key='test-secret',
        account_id='zp-123',
        timeout=5,
    )


@pytest.fixture
def http_client(session, config):
    return HTTPClient(timeout=config.timeout, session=session)


@pytest.fixture
def zenopay(config, http_client):
    return ZenoPay(config, http_client)
