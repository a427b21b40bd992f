# agronomy/services.py
import logging

import requests

from .errors import NetworkError
from .schemas import ProviderErrorResponse, RecommendationResponse, YieldResponse, decode_response

logger = logging.getLogger(__name__)


def _post(session, url, payload, timeout, headers=None):
    try:
        return session.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(f'request to {url} failed: {e}') from e


class YieldPredictionClient:
    def __init__(self, config, session=None):
        config.require('yield_prediction_url')
        self.config = config
        self.session = session or requests.Session()

    def predict(self, payload):
        """POST the merged form and weather payload, return the predicted yield."""
        logger.debug("Requesting yield prediction for crop %s", payload.get('crop'))
        response = _post(self.session, self.config.yield_prediction_url, payload, self.config.timeout)
        outcome = decode_response(response, YieldResponse)
        if not outcome.ok:
            outcome.raise_error()
        return outcome.data.yield_


class CropRecommendationClient:
    def __init__(self, config, session=None):
        config.require('recommendation_url', 'recommendation_api_key')
        self.config = config
        self.session = session or requests.Session()

    def recommend(self, payload):
        """POST soil parameters, return the list of recommended crop names."""
        headers = {'Authorization': f'Bearer {self.config.recommendation_api_key}'}
        response = _post(self.session, self.config.recommendation_url, payload, self.config.timeout, headers=headers)
        outcome = decode_response(response, RecommendationResponse, error_model=ProviderErrorResponse)
        if not outcome.ok:
            outcome.raise_error()
        return list(outcome.data.crops)
