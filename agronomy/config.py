# agronomy/config.py
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_WEATHER_URL = 'https://api.openweathermap.org/data/2.5/weather'
DEFAULT_RECOMMENDATION_URL = 'https://agricultural-optimizer-api.onrender.com/api/recommend-crop'


@dataclass(frozen=True)
class OptimizerConfig:
    """Endpoints and credentials for the external services.

    Built once from Django settings and handed to each client, which checks
    the values it needs when it is constructed.
    """
    weather_api_key: str = ''
    weather_url: str = DEFAULT_WEATHER_URL
    yield_prediction_url: str = ''
    recommendation_url: str = DEFAULT_RECOMMENDATION_URL
    recommendation_api_key: str = ''
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, source=None):
        source = source if source is not None else settings
        return cls(
            weather_api_key=getattr(source, 'OPENWEATHER_API_KEY', '') or '',
            weather_url=getattr(source, 'OPENWEATHER_URL', '') or DEFAULT_WEATHER_URL,
            yield_prediction_url=getattr(source, 'YIELD_PREDICTION_URL', '') or '',
            recommendation_url=getattr(source, 'CROP_RECOMMENDATION_URL', '') or DEFAULT_RECOMMENDATION_URL,
            recommendation_api_key=getattr(source, 'CROP_RECOMMENDATION_API_KEY', '') or '',
            timeout=getattr(source, 'AGRI_HTTP_TIMEOUT', None),
        )

    def require(self, *names):
        missing = [name for name in names if not getattr(self, name)]
        if missing:
            raise ImproperlyConfigured(f"Missing configuration value(s): {', '.join(missing)}")
