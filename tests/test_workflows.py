"""
Tests for the yield and recommendation submission workflows
"""
import threading
from unittest import mock

import pytest

from agronomy.errors import NetworkError, ParseError, ProviderError
from agronomy.weather import WeatherSnapshot
from agronomy.workflows import (
    RECOMMENDATION_ERROR_MESSAGE,
    YIELD_ERROR_MESSAGE,
    RecommendationWorkflow,
    SubmissionState,
    YieldWorkflow,
)

YIELD_INPUT = {
    'region': 'north',
    'soil_type': 'loam',
    'crop': 'wheat',
    'fertilizer': 'high',
    'irrigation': 'No',
    'days_to_harvest': 95,
}
SOIL_INPUT = {'nitrogen': 90, 'phosphorus': 42, 'potassium': 43, 'ph_value': 6.5}


@pytest.fixture
def weather_client():
    client = mock.Mock()
    client.lookup.return_value = WeatherSnapshot(temperature_celsius=18.0, precipitation_mm=0, humidity_percent=70.0)
    return client


@pytest.fixture
def prediction_client():
    client = mock.Mock()
    client.predict.return_value = 3.7
    return client


@pytest.fixture
def recommendation_client():
    client = mock.Mock()
    client.recommend.return_value = ['wheat', 'rice']
    return client


def test_new_workflow_is_idle(weather_client, prediction_client):
    workflow = YieldWorkflow(weather_client, prediction_client)
    assert workflow.state == SubmissionState()
    assert workflow.state.status == 'idle'
    assert not workflow.is_loading


def test_yield_success_merges_weather_into_payload(weather_client, prediction_client):
    workflow = YieldWorkflow(weather_client, prediction_client)

    state = workflow.submit(YIELD_INPUT)

    assert state.status == 'success'
    assert state.error is None
    assert '3.7' in state.result
    assert state.result == 'Predicted yield: 3.7 tons per hectare'
    weather_client.lookup.assert_called_once_with('north')
    prediction_client.predict.assert_called_once_with({
        'region': 'north',
        'soilType': 'loam',
        'crop': 'wheat',
        'fertilizer': 'high',
        'irrigation': 'No',
        'daysToHarvest': 95,
        'temperature': 18.0,
        'rainfall': 0,
        'humidity': 70.0,
    })


def test_weather_failure_never_calls_prediction(weather_client, prediction_client):
    weather_client.lookup.side_effect = NetworkError('401 response from weather')
    workflow = YieldWorkflow(weather_client, prediction_client)

    state = workflow.submit(YIELD_INPUT)

    assert state.status == 'failed'
    assert state.error == YIELD_ERROR_MESSAGE
    assert state.result is None
    prediction_client.predict.assert_not_called()


@pytest.mark.parametrize('exc', [NetworkError('500'), ParseError('no yield'), ProviderError('bad crop')])
def test_prediction_failures_show_generic_message(weather_client, prediction_client, exc, caplog):
    prediction_client.predict.side_effect = exc
    workflow = YieldWorkflow(weather_client, prediction_client)

    state = workflow.submit(YIELD_INPUT)

    assert state.error == YIELD_ERROR_MESSAGE
    assert str(exc) not in state.error
    assert 'yield submission failed' in caplog.text


def test_next_submission_clears_previous_error(weather_client, prediction_client):
    workflow = YieldWorkflow(weather_client, prediction_client)
    prediction_client.predict.side_effect = [ParseError('bad body'), 5]

    assert workflow.submit(YIELD_INPUT).status == 'failed'
    state = workflow.submit(YIELD_INPUT)

    assert state == SubmissionState(result='Predicted yield: 5 tons per hectare')


def test_recommendation_success_joins_crops(recommendation_client):
    workflow = RecommendationWorkflow(recommendation_client)

    state = workflow.submit(SOIL_INPUT)

    assert state.status == 'success'
    assert 'wheat, rice' in state.result
    recommendation_client.recommend.assert_called_once_with(
        {'nitrogen': 90, 'phosphorus': 42, 'potassium': 43, 'phValue': 6.5}
    )


def test_recommendation_provider_message_is_shown(recommendation_client):
    recommendation_client.recommend.side_effect = ProviderError('Soil too acidic')

    state = RecommendationWorkflow(recommendation_client).submit(SOIL_INPUT)

    assert state == SubmissionState(error='Soil too acidic')


@pytest.mark.parametrize('exc', [NetworkError('503'), ParseError('crops missing'), ProviderError('')])
def test_recommendation_falls_back_to_generic_message(recommendation_client, exc):
    recommendation_client.recommend.side_effect = exc

    state = RecommendationWorkflow(recommendation_client).submit(SOIL_INPUT)

    assert state.error == RECOMMENDATION_ERROR_MESSAGE
    assert state.result is None


def test_workflows_keep_independent_state(weather_client, prediction_client, recommendation_client):
    recommendation_client.recommend.side_effect = NetworkError('down')
    yield_workflow = YieldWorkflow(weather_client, prediction_client)
    recommendation_workflow = RecommendationWorkflow(recommendation_client)

    yield_workflow.submit(YIELD_INPUT)
    recommendation_workflow.submit(SOIL_INPUT)

    assert yield_workflow.state.status == 'success'
    assert recommendation_workflow.state.status == 'failed'


def test_resubmitting_while_loading_does_not_disturb_in_flight_submission(weather_client, prediction_client):
    started = threading.Event()
    release = threading.Event()

    def slow_predict(payload):
        started.set()
        release.wait(5)
        return 2.5

    prediction_client.predict.side_effect = slow_predict
    workflow = YieldWorkflow(weather_client, prediction_client)
    results = []
    worker = threading.Thread(target=lambda: results.append(workflow.submit(YIELD_INPUT)))
    worker.start()
    assert started.wait(5)

    assert workflow.is_loading
    overlapping = workflow.submit(dict(YIELD_INPUT, region='south'))
    assert overlapping.is_loading
    assert overlapping.result is None and overlapping.error is None

    release.set()
    worker.join(5)

    assert results == [SubmissionState(result='Predicted yield: 2.5 tons per hectare')]
    assert workflow.state == results[0]
    assert prediction_client.predict.call_count == 1
    weather_client.lookup.assert_called_once_with('north')


def test_state_round_trips_through_session_dict():
    state = SubmissionState(error='An error occurred')
    assert SubmissionState.from_dict(state.as_dict()) == state
    assert SubmissionState.from_dict(None) == SubmissionState()
