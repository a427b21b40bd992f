"""
Pytest configuration and fixtures
"""
import json
from unittest import mock

import pytest
import requests

from agronomy.config import OptimizerConfig


class FakeResponse:
    """Stand-in for ``requests.Response`` with just what the clients read."""

    def __init__(self, status_code=200, body=None, text=None, url='http://service.test/'):
        self.status_code = status_code
        self.url = url
        self._body = body
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        if self._body is None:
            raise ValueError('No JSON object could be decoded')
        return self._body


@pytest.fixture
def config():
    return OptimizerConfig(
        weather_api_key='weather-key',
        weather_url='http://weather.test/data/2.5/weather',
        yield_prediction_url='http://yield.test/predict-yield',
        recommendation_url='http://recommend.test/api/recommend-crop',
        recommendation_api_key='recommend-key',
    )


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def weather_body():
    return {'main': {'temp': 21.5, 'humidity': 64}, 'rain': {'1h': 1.2}}


@pytest.fixture
def service_settings(settings):
    settings.OPENWEATHER_API_KEY = 'weather-key'
    settings.OPENWEATHER_URL = 'http://weather.test/data/2.5/weather'
    settings.YIELD_PREDICTION_URL = 'http://yield.test/predict-yield'
    settings.CROP_RECOMMENDATION_URL = 'http://recommend.test/api/recommend-crop'
    settings.CROP_RECOMMENDATION_API_KEY = 'recommend-key'
    return settings


@pytest.fixture
def fake_response():
    return FakeResponse
