import json

import pytest

from finmitra.llm import prompts
from finmitra.llm.schemas import (
    InvestmentGuidanceInput,
    InvestmentGuidanceOutput,
    InvestmentPlanInput,
    SimplifyFinancialConceptInput,
)


def test_guidance_prompt_interpolates_every_field():
    data = InvestmentGuidanceInput(
        age=28,
        income=800000,
        risk_tolerance="Aggressive",
        financial_goals="Retire early",
        investment_amount=10000,
        time_horizon="15 years",
        dependents=2,
        debt=150000.5,
    )
    text = prompts.render(prompts.GUIDANCE_TEMPLATE, data.wire())

    assert "Age: 28\n" in text
    assert "Income: 800000 INR" in text
    assert "Risk Tolerance: Aggressive" in text
    assert "Financial Goals: Retire early" in text
    assert "Investment Amount: 10000 INR per month" in text
    assert "Time Horizon: 15 years" in text
    assert "Number of Dependents: 2" in text
    assert "Debt: 150000.5 INR" in text
    # literal braces of the example survive formatting
    assert '"investmentOptions": [' in text
    assert "{age}" not in text


def test_plan_prompt_mentions_profile_rules():
    text = prompts.render(prompts.PLAN_TEMPLATE, InvestmentPlanInput(risk_profile="moderate").wire())
    assert "Risk Profile: moderate" in text
    assert "For conservative profiles" in text


def test_concept_with_braces_is_not_reinterpolated():
    text = prompts.render(prompts.CONCEPT_TEMPLATE, SimplifyFinancialConceptInput(concept="{age} ETF").wire())
    assert "{age} ETF" in text


def test_missing_field_raises_key_error():
    with pytest.raises(KeyError):
        prompts.render(prompts.PLAN_TEMPLATE, {})


def test_output_instructions_embed_camel_case_schema():
    text = prompts.output_instructions(InvestmentGuidanceOutput)
    assert text.lstrip().startswith("Return ONLY valid JSON")
    schema = json.loads(text[text.index("{"):])
    assert set(schema["properties"]) == {"investmentOptions", "disclaimer"}
