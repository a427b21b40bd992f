# agronomy/views.py
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_POST

from .forms import CropRecommendationForm, YieldPredictionForm
from .workflows import SubmissionState, recommendation_workflow, yield_workflow

TABS = ('yield', 'recommendation')
SESSION_KEYS = {'yield': 'yield_state', 'recommendation': 'recommendation_state'}


def _state(request, tab):
    # only finished states are stored; the page script disables submit while a request is out
    return SubmissionState.from_dict(request.session.get(SESSION_KEYS[tab]))


def _render(request, active_tab, yield_form=None, recommendation_form=None):
    context = {
        'active_tab': active_tab,
        'yield_form': yield_form if yield_form is not None else YieldPredictionForm(),
        'recommendation_form': recommendation_form if recommendation_form is not None else CropRecommendationForm(),
        'yield_state': _state(request, 'yield'),
        'recommendation_state': _state(request, 'recommendation'),
    }
    return render(request, 'agronomy/home.html', context)


@require_GET
def home(request):
    tab = request.GET.get('tab')
    return _render(request, tab if tab in TABS else 'yield')


@require_POST
def submit_yield(request):
    form = YieldPredictionForm(request.POST)
    if form.is_valid():
        state = yield_workflow().submit(form.cleaned_data)
        request.session[SESSION_KEYS['yield']] = state.as_dict()
    return _render(request, 'yield', yield_form=form)


@require_POST
def submit_recommendation(request):
    form = CropRecommendationForm(request.POST)
    if form.is_valid():
        state = recommendation_workflow().submit(form.cleaned_data)
        request.session[SESSION_KEYS['recommendation']] = state.as_dict()
    return _render(request, 'recommendation', recommendation_form=form)
