import pytest
from pydantic import ValidationError

from finmitra.api.types import (
    InvestmentGuidanceForm,
    InvestmentPlanForm,
    SimplifyConceptForm,
    flatten_errors,
)


def _field_errors(model, values) -> dict:
    with pytest.raises(ValidationError) as exc:
        model.model_validate(values)
    return flatten_errors(exc.value)["fieldErrors"]


def test_valid_form_coerces_strings(guidance_form):
    form = InvestmentGuidanceForm.model_validate(guidance_form)
    assert form.age == 28
    assert form.dependents == 1
    assert form.risk_tolerance == "Moderate"


@pytest.mark.parametrize("age", ["18", "100"])
def test_age_bounds_accepted(guidance_form, age):
    guidance_form["age"] = age
    assert InvestmentGuidanceForm.model_validate(guidance_form).age == float(age)


@pytest.mark.parametrize(
    "age, message",
    [("17", "Age must be at least 18."), ("101", "Please enter a valid age.")],
)
def test_age_bounds_rejected(guidance_form, age, message):
    guidance_form["age"] = age
    assert _field_errors(InvestmentGuidanceForm, guidance_form) == {"age": [message]}


def test_investment_amount_minimum(guidance_form):
    guidance_form["investmentAmount"] = "499"
    assert _field_errors(InvestmentGuidanceForm, guidance_form) == {
        "investmentAmount": ["Investment amount must be at least ₹500."]
    }
    guidance_form["investmentAmount"] = "500"
    assert InvestmentGuidanceForm.model_validate(guidance_form).investment_amount == 500


def test_negative_amounts_rejected(guidance_form):
    guidance_form.update(income="-1", debt="-5", dependents="-1")
    assert _field_errors(InvestmentGuidanceForm, guidance_form) == {
        "income": ["Income cannot be negative."],
        "debt": ["Debt amount cannot be negative."],
        "dependents": ["Number of dependents cannot be negative."],
    }


def test_fractional_dependents_rejected(guidance_form):
    guidance_form["dependents"] = "1.5"
    assert "dependents" in _field_errors(InvestmentGuidanceForm, guidance_form)


def test_blank_optional_numbers_default_to_zero(guidance_form):
    guidance_form.update(debt="", dependents="  ")
    form = InvestmentGuidanceForm.model_validate(guidance_form)
    assert form.debt == 0
    assert form.dependents == 0


def test_short_goals_and_missing_horizon(guidance_form):
    guidance_form.update(financialGoals="house", timeHorizon="")
    assert _field_errors(InvestmentGuidanceForm, guidance_form) == {
        "financialGoals": ["Please describe your financial goals in more detail."],
        "timeHorizon": ["Please provide a time horizon (e.g., '5 years')."],
    }


def test_goals_too_long(guidance_form):
    guidance_form["financialGoals"] = "x" * 501
    assert "financialGoals" in _field_errors(InvestmentGuidanceForm, guidance_form)


def test_unknown_risk_tolerance(guidance_form):
    guidance_form["riskTolerance"] = "Reckless"
    assert "riskTolerance" in _field_errors(InvestmentGuidanceForm, guidance_form)


def test_non_numeric_age(guidance_form):
    guidance_form["age"] = "twenty"
    assert "age" in _field_errors(InvestmentGuidanceForm, guidance_form)


def test_plan_profile_is_lowercase_enum():
    assert InvestmentPlanForm.model_validate({"riskProfile": "aggressive"}).risk_profile == "aggressive"
    assert "riskProfile" in _field_errors(InvestmentPlanForm, {"riskProfile": "Aggressive"})


@pytest.mark.parametrize("concept", ["ETF", "x" * 100])
def test_concept_length_accepted(concept):
    assert SimplifyConceptForm.model_validate({"concept": concept}).concept == concept


def test_concept_too_short_after_trimming():
    assert _field_errors(SimplifyConceptForm, {"concept": " a "}) == {
        "concept": ["Concept must be at least 2 characters long."]
    }


def test_concept_too_long():
    assert "concept" in _field_errors(SimplifyConceptForm, {"concept": "x" * 101})


def test_flatten_errors_reports_missing_fields():
    errors = _field_errors(SimplifyConceptForm, {})
    assert list(errors) == ["concept"]


@pytest.mark.parametrize("field", ["income", "debt", "investmentAmount"])
@pytest.mark.parametrize("value", ["inf", "-inf", "nan", "1e400"])
def test_non_finite_numbers_rejected(guidance_form, field, value):
    guidance_form[field] = value
    errors = _field_errors(InvestmentGuidanceForm, guidance_form)
    assert list(errors) == [field]
    assert errors[field] == ["Input should be a finite number"]
