# agronomy/workflows.py
"""Submission workflows behind the yield and recommendation tabs."""
import logging
import threading
from dataclasses import asdict, dataclass
from typing import Optional

from .config import OptimizerConfig
from .errors import ProviderError
from .services import CropRecommendationClient, YieldPredictionClient
from .weather import WeatherClient

logger = logging.getLogger(__name__)

YIELD_ERROR_MESSAGE = 'An error occurred while fetching the prediction'
RECOMMENDATION_ERROR_MESSAGE = 'An error occurred while fetching recommendations'


@dataclass
class SubmissionState:
    is_loading: bool = False
    error: Optional[str] = None
    result: Optional[str] = None

    @property
    def status(self):
        if self.is_loading:
            return 'loading'
        if self.error is not None:
            return 'failed'
        if self.result is not None:
            return 'success'
        return 'idle'

    def as_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        if not data:
            return cls()
        return cls(error=data.get('error'), result=data.get('result'))


class SubmissionWorkflow:
    name = 'submission'
    error_message = 'An error occurred'

    def __init__(self):
        self.state = SubmissionState()
        self._lock = threading.Lock()

    @property
    def is_loading(self):
        return self.state.is_loading

    def submit(self, data):
        with self._lock:
            if self.state.is_loading:
                logger.warning("Ignoring %s submission while another is in flight", self.name)
                return self.state
            self.state = SubmissionState(is_loading=True)

        try:
            final = SubmissionState(result=self.run(data))
        except Exception as e:
            logger.exception("%s submission failed", self.name)
            final = SubmissionState(error=self.describe_error(e))

        with self._lock:
            self.state = final
        return final

    def run(self, data):
        raise NotImplementedError

    def describe_error(self, exc):
        return self.error_message


def build_yield_payload(data, weather):
    return {
        'region': data['region'],
        'soilType': data['soil_type'],
        'crop': data['crop'],
        'fertilizer': data['fertilizer'],
        'irrigation': data['irrigation'],
        'daysToHarvest': data['days_to_harvest'],
        'temperature': weather.temperature_celsius,
        'rainfall': weather.precipitation_mm,
        'humidity': weather.humidity_percent,
    }


def build_recommendation_payload(data):
    return {
        'nitrogen': data['nitrogen'],
        'phosphorus': data['phosphorus'],
        'potassium': data['potassium'],
        'phValue': data['ph_value'],
    }


class YieldWorkflow(SubmissionWorkflow):
    name = 'yield'
    error_message = YIELD_ERROR_MESSAGE

    def __init__(self, weather_client, prediction_client):
        super().__init__()
        self.weather_client = weather_client
        self.prediction_client = prediction_client

    def run(self, data):
        weather = self.weather_client.lookup(data['region'])
        predicted = self.prediction_client.predict(build_yield_payload(data, weather))
        return f'Predicted yield: {predicted} tons per hectare'


class RecommendationWorkflow(SubmissionWorkflow):
    name = 'recommendation'
    error_message = RECOMMENDATION_ERROR_MESSAGE

    def __init__(self, recommendation_client):
        super().__init__()
        self.recommendation_client = recommendation_client

    def run(self, data):
        crops = self.recommendation_client.recommend(build_recommendation_payload(data))
        return f"Recommended crops: {', '.join(crops)}"

    def describe_error(self, exc):
        if isinstance(exc, ProviderError) and exc.message:
            return exc.message
        return self.error_message


def yield_workflow(config=None):
    config = config or OptimizerConfig.from_settings()
    return YieldWorkflow(WeatherClient(config), YieldPredictionClient(config))


def recommendation_workflow(config=None):
    config = config or OptimizerConfig.from_settings()
    return RecommendationWorkflow(CropRecommendationClient(config))
