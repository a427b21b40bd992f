# agronomy/forms.py
import re

from django import forms
from django.core.validators import MaxValueValidator, MinValueValidator, RegexValidator

REGION_CHOICES = [('north', 'North'), ('south', 'South'), ('east', 'East'), ('west', 'West')]
SOIL_TYPE_CHOICES = [('clay', 'Clay'), ('loam', 'Loam'), ('sandy', 'Sandy'), ('silt', 'Silt')]
CROP_CHOICES = [('wheat', 'Wheat'), ('rice', 'Rice'), ('corn', 'Corn'), ('soybean', 'Soybean')]
FERTILIZER_CHOICES = [('low', 'Low'), ('medium', 'Medium'), ('high', 'High')]
IRRIGATION_CHOICES = [('Yes', 'Yes'), ('No', 'No')]


def _select(label, choices, required_message):
    return forms.ChoiceField(
        label=label,
        choices=[('', f'Select {label.lower()}')] + choices,
        error_messages={
            'required': required_message,
            'invalid_choice': f'Select a valid {label.lower()}.',
        },
    )


class NonNegativeIntegerField(forms.CharField):
    """Whole number typed as text; the raw value must be digits only."""
    default_validators = [
        RegexValidator(re.compile(r'\A\d+\Z', re.ASCII), 'Must be a valid number'),
    ]

    def __init__(self, **kwargs):
        kwargs.setdefault('strip', False)
        kwargs.setdefault('widget', forms.NumberInput)
        super().__init__(**kwargs)

    def clean(self, value):
        value = super().clean(value)
        try:
            number = int(value)
        except ValueError:
            # longer than the interpreter allows for int conversion
            raise forms.ValidationError('Must be a valid number', code='invalid')
        MinValueValidator(0, 'Cannot be negative')(number)
        return number


class PhValueField(forms.CharField):
    default_validators = [
        RegexValidator(re.compile(r'\A\d*\.?\d+\Z', re.ASCII), 'Must be a valid pH value'),
    ]

    def __init__(self, **kwargs):
        kwargs.setdefault('strip', False)
        kwargs.setdefault('widget', forms.NumberInput(attrs={'step': '0.1'}))
        super().__init__(**kwargs)

    def clean(self, value):
        value = super().clean(value)
        ph = float(value)
        MinValueValidator(0, 'pH must be between 0 and 14')(ph)
        MaxValueValidator(14, 'pH must be between 0 and 14')(ph)
        return ph


class YieldPredictionForm(forms.Form):
    region = _select('Region', REGION_CHOICES, 'Region is required')
    soil_type = _select('Soil type', SOIL_TYPE_CHOICES, 'Soil type is required')
    crop = _select('Crop', CROP_CHOICES, 'Crop is required')
    fertilizer = _select('Fertilizer usage', FERTILIZER_CHOICES, 'Fertilizer usage is required')
    irrigation = _select('Irrigation usage', IRRIGATION_CHOICES, 'Irrigation usage is required')
    days_to_harvest = NonNegativeIntegerField(
        label='Days to harvest',
        error_messages={'required': 'Must be a valid number'},
    )


class CropRecommendationForm(forms.Form):
    nitrogen = NonNegativeIntegerField(label='Nitrogen content', error_messages={'required': 'Must be a valid number'})
    phosphorus = NonNegativeIntegerField(label='Phosphorus content', error_messages={'required': 'Must be a valid number'})
    potassium = NonNegativeIntegerField(label='Potassium content', error_messages={'required': 'Must be a valid number'})
    ph_value = PhValueField(label='pH value', error_messages={'required': 'Must be a valid pH value'})


FORMS = {
    'yield': YieldPredictionForm,
    'recommendation': CropRecommendationForm,
}
