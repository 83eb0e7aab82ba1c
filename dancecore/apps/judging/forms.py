# dancecore/apps/judging/forms.py
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from django import forms

from .models import CRITERIA, CRITERION_MAX, TOTAL_MAX


def _score_field(label: str, max_value: Decimal) -> forms.DecimalField:
    return forms.DecimalField(
        label=label,
        min_value=Decimal("0"),
        max_value=max_value,
        max_digits=6,
        decimal_places=2,
        widget=forms.NumberInput(attrs={"min": 0, "max": int(max_value), "step": "0.5"}),
    )


# ---------- Cinco criterios (0..20 cada uno) ----------
class ScoreValuesForm(forms.Form):
    technical_score = _score_field("Técnica", CRITERION_MAX)
    musical_score = _score_field("Musicalidad", CRITERION_MAX)
    performance_score = _score_field("Interpretación", CRITERION_MAX)
    styling_score = _score_field("Estilo", CRITERION_MAX)
    overall_impression_score = _score_field("Impresión general", CRITERION_MAX)
    comments = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 2}))

    def values(self) -> Dict[str, Decimal]:
        return {name: self.cleaned_data[name] for name in CRITERIA}


# ---------- Edición solo del total (0..100) ----------
class ScoreTotalForm(forms.Form):
    total = _score_field("Total", TOTAL_MAX)


def error_text(form: forms.Form) -> str:
    """Errores del form en una sola línea (para respuestas JSON)."""
    parts = []
    for name, errors in form.errors.items():
        label = name if name != "__all__" else "score"
        parts.append(f"{label}: {' '.join(str(e) for e in errors)}")
    return "; ".join(parts)


def form_errors(form: forms.Form) -> Dict[str, Any]:
    return {name: [str(e) for e in errors] for name, errors in form.errors.items()}
