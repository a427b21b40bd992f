# agronomy/weather.py
import logging
from dataclasses import dataclass

import requests

from .errors import NetworkError
from .schemas import WeatherResponse, decode_response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature_celsius: float
    precipitation_mm: float
    humidity_percent: float


class WeatherClient:
    """Current conditions for a region from OpenWeatherMap."""

    def __init__(self, config, session=None):
        config.require('weather_api_key', 'weather_url')
        self.config = config
        self.session = session or requests.Session()

    def lookup(self, region):
        params = {'q': region, 'units': 'metric', 'appid': self.config.weather_api_key}
        logger.debug("Fetching weather for region %s", region)
        try:
            response = self.session.get(self.config.weather_url, params=params, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise NetworkError(f'weather request failed: {e}') from e

        outcome = decode_response(response, WeatherResponse)
        if not outcome.ok:
            outcome.raise_error()
        data = outcome.data
        # no rain block means no rain in the last hour
        rain = data.rain.one_hour if data.rain is not None else None
        return WeatherSnapshot(
            temperature_celsius=data.main.temp,
            precipitation_mm=rain or 0,
            humidity_percent=data.main.humidity,
        )
