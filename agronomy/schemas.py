# agronomy/schemas.py
"""Response shapes of the external services."""
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError

from .errors import ERROR_KINDS


class WeatherMain(BaseModel):
    temp: float
    humidity: float


class WeatherRain(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    one_hour: Optional[float] = Field(default=None, alias='1h')


class WeatherResponse(BaseModel):
    main: WeatherMain
    rain: Optional[WeatherRain] = None


class YieldResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    yield_: Union[StrictInt, StrictFloat] = Field(alias='yield')


class RecommendationResponse(BaseModel):
    crops: List[str] = Field(min_length=1)


class ProviderErrorResponse(BaseModel):
    message: Optional[str] = None


@dataclass(frozen=True)
class Success:
    data: Any

    ok = True


@dataclass(frozen=True)
class Failure:
    kind: str
    detail: str

    ok = False

    def raise_error(self):
        raise ERROR_KINDS[self.kind](self.detail)


def _json_body(response):
    try:
        return Success(response.json())
    except ValueError as e:
        return Failure('parse', f'response body is not JSON: {e}')


def decode_response(response, model, error_model=None):
    """Decode ``response`` into ``model`` or describe why it could not be.

    Non-success statuses become a ``network`` failure unless ``error_model``
    is given and the body carries a non-empty ``message``, in which case the
    failure is of kind ``provider`` with that message as its detail.
    """
    if not response.ok:
        if error_model is not None:
            body = _json_body(response)
            if body.ok:
                try:
                    error = error_model.model_validate(body.data)
                except ValidationError:
                    error = None
                if error is not None and error.message:
                    return Failure('provider', error.message)
        return Failure('network', f'{response.status_code} response from {response.url}')

    body = _json_body(response)
    if not body.ok:
        return body
    try:
        return Success(model.model_validate(body.data))
    except ValidationError as e:
        return Failure('parse', f'unexpected {model.__name__} payload: {e}')
