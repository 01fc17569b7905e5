import json
from typing import Any, Mapping, Type

from pydantic import BaseModel


# System personas

GUIDANCE_SYSTEM = """You are a financial advisor specializing in the Indian market.
You explain options to people with low to moderate financial literacy.
Never give specific stock tips or guarantees. Promote long-term, consistent investing.
"""

PLAN_SYSTEM = """You are a financial advisor who specializes in generating investment plans."""

CONCEPT_SYSTEM = """You are a financial expert specializing in simplifying complex financial concepts for individuals with low to moderate financial literacy."""


# User templates ({field} is interpolated, {{ }} are literal braces)

GUIDANCE_TEMPLATE = """Based on the user's profile, provide personalized investment guidance.

User Profile:
Age: {age}
Income: {income} INR
Risk Tolerance: {riskTolerance}
Financial Goals: {financialGoals}
Investment Amount: {investmentAmount} INR per month
Time Horizon: {timeHorizon}
Number of Dependents: {dependents}
Debt: {debt} INR

Consider investment options like mutual funds, stocks, fixed deposits, and government schemes (e.g., SIPs, NPS, PPF, ELSS).
Explain the pros/cons and risk levels of each option.
Provide a disclaimer about investment risks. Never give specific stock tips or guarantees. Promote long-term, consistent investing.

Here's an example output:
{{
  "investmentOptions": [
    {{
      "name": "Equity Mutual Funds",
      "description": "Invest in a diversified portfolio of stocks.",
      "riskLevel": "High",
      "expectedReturn": "12-15% per annum",
      "suitability": "Suitable for long-term goals like retirement if you have a high risk tolerance."
    }},
    {{
      "name": "National Pension System (NPS)",
      "description": "A government-backed retirement savings scheme.",
      "riskLevel": "Medium",
      "expectedReturn": "8-10% per annum",
      "suitability": "Good for retirement savings and tax benefits."
    }}
  ],
  "disclaimer": "Investments are subject to market risks. Please read all scheme related documents carefully."
}}

Return the output in the above format.
"""

PLAN_TEMPLATE = """Based on the risk profile of the user, generate an investment plan.

Risk Profile: {riskProfile}

The plan should contain a number of different investment options along with
a percentage of investment that the user should allocate to each. Explain the reasoning behind the plan.
The possible options include: Fixed Deposits, Government Bonds, Mutual Funds, Stocks, Gold, Real Estate, etc.

For conservative profiles, the plan should focus on low-risk investments such as fixed deposits and government bonds.
For moderate profiles, the plan should include a mix of low-risk and medium-risk investments such as mutual funds and stocks.
For aggressive profiles, the plan should focus on high-risk investments such as stocks and real estate.
"""

CONCEPT_TEMPLATE = """Please provide a simplified explanation of the following financial concept:

{concept}

Your explanation should be easy to understand, avoid jargon, and use analogies or real-world examples where possible.
"""


def _fmt(value: Any) -> str:
    # 28.0 -> "28" so numbers read naturally in the prompt
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render(template: str, values: Mapping[str, Any]) -> str:
    """Interpolate camelCase input fields into a template. Missing fields raise KeyError."""
    return template.format_map({k: _fmt(v) for k, v in values.items()})


def output_instructions(model: Type[BaseModel]) -> str:
    schema = model.model_json_schema(by_alias=True)
    return (
        "\nReturn ONLY valid JSON (no markdown, no code fences) matching exactly this schema:\n"
        + json.dumps(schema, ensure_ascii=False, indent=2)
    )
