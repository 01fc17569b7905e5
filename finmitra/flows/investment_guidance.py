"""
Personalized investment guidance from the user's risk profile and financial goals.
"""

from finmitra.flows.registry import register
from finmitra.flows.runner import run_flow
from finmitra.llm.prompts import GUIDANCE_SYSTEM, GUIDANCE_TEMPLATE
from finmitra.llm.schemas import InvestmentGuidanceInput, InvestmentGuidanceOutput

FLOW_NAME = "investmentGuidanceFlow"

MOCK_REPLY = {
    "investmentOptions": [
        {
            "name": "Equity Mutual Funds (SIP)",
            "description": "Invest a fixed amount every month in a diversified portfolio of stocks.",
            "riskLevel": "High",
            "expectedReturn": "12-15% per annum",
            "suitability": "Suitable for long-term goals like retirement if you can stay invested through market swings.",
        },
        {
            "name": "Public Provident Fund (PPF)",
            "description": "A government-backed savings scheme with a 15-year lock-in and tax benefits.",
            "riskLevel": "Low",
            "expectedReturn": "7-7.5% per annum",
            "suitability": "A stable base for long-term savings with tax-free returns.",
        },
    ],
    "disclaimer": "Investments are subject to market risks. Please read all scheme related documents carefully.",
}


@register(FLOW_NAME, InvestmentGuidanceInput, InvestmentGuidanceOutput)
async def investment_guidance(data: InvestmentGuidanceInput) -> InvestmentGuidanceOutput:
    return await run_flow(
        FLOW_NAME,
        system=GUIDANCE_SYSTEM,
        template=GUIDANCE_TEMPLATE,
        data=data,
        output_model=InvestmentGuidanceOutput,
        mock=MOCK_REPLY,
    )
