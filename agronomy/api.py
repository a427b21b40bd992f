# agronomy/api.py
from collections.abc import Mapping

from django.http import Http404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .forms import FORMS, CropRecommendationForm, YieldPredictionForm
from .workflows import recommendation_workflow, yield_workflow


def _field_errors(form):
    return {field: [str(message) for message in messages] for field, messages in form.errors.items()}


NOT_AN_OBJECT = {'non_field_errors': ['Expected a JSON object of form fields']}


def _submit(request, form_class, make_workflow):
    if not isinstance(request.data, Mapping):
        return Response({'errors': NOT_AN_OBJECT}, status=status.HTTP_400_BAD_REQUEST)
    form = form_class(request.data)
    if not form.is_valid():
        return Response({'errors': _field_errors(form)}, status=status.HTTP_400_BAD_REQUEST)
    state = make_workflow().submit(form.cleaned_data)
    return Response(state.as_dict())


@api_view(['POST'])
def api_predict_yield(request):
    return _submit(request, YieldPredictionForm, yield_workflow)


@api_view(['POST'])
def api_recommend_crop(request):
    return _submit(request, CropRecommendationForm, recommendation_workflow)


@api_view(['POST'])
def api_validate(request, form_name):
    form_class = FORMS.get(form_name)
    if form_class is None:
        raise Http404(f'Unknown form {form_name!r}')
    if not isinstance(request.data, Mapping):
        return Response({'valid': False, 'errors': NOT_AN_OBJECT}, status=status.HTTP_400_BAD_REQUEST)
    form = form_class(request.data)
    valid = form.is_valid()
    return Response({'valid': valid, 'errors': {} if valid else _field_errors(form)})
