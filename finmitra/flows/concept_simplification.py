"""
Plain-language explanations of financial terms.
"""

from finmitra.flows.registry import register
from finmitra.flows.runner import run_flow
from finmitra.llm.prompts import CONCEPT_SYSTEM, CONCEPT_TEMPLATE
from finmitra.llm.schemas import SimplifyFinancialConceptInput, SimplifyFinancialConceptOutput

FLOW_NAME = "simplifyFinancialConceptFlow"

# Terms offered as one-click lookups in the dictionary tab
SUGGESTED_TERMS = ["Stock Market", "Bonds", "401(k)", "ETF", "Roth IRA", "Index Fund"]


@register(FLOW_NAME, SimplifyFinancialConceptInput, SimplifyFinancialConceptOutput)
async def simplify_financial_concept(data: SimplifyFinancialConceptInput) -> SimplifyFinancialConceptOutput:
    mock = {
        "simplifiedExplanation": (
            f"{data.concept} is explained here in plain words. Think of it like a piggy bank with rules: "
            "you put money in, and the rules decide how it grows and when you can take it out."
        )
    }
    return await run_flow(
        FLOW_NAME,
        system=CONCEPT_SYSTEM,
        template=CONCEPT_TEMPLATE,
        data=data,
        output_model=SimplifyFinancialConceptOutput,
        mock=mock,
    )
