"""
Starter investment plans for a given risk profile.
"""

from finmitra.flows.registry import register
from finmitra.flows.runner import run_flow
from finmitra.llm.prompts import PLAN_SYSTEM, PLAN_TEMPLATE
from finmitra.llm.schemas import InvestmentPlanInput, InvestmentPlanOutput

FLOW_NAME = "investmentPlanGeneratorFlow"

_MOCK_PLANS = {
    "conservative": (
        "Fixed Deposits: 40%\nGovernment Bonds: 35%\nDebt Mutual Funds: 15%\nGold: 10%\n\n"
        "Most of the money sits in instruments with predictable returns, so the value of your savings "
        "stays steady while still beating a regular savings account."
    ),
    "moderate": (
        "Mutual Funds: 40%\nStocks: 20%\nFixed Deposits: 20%\nGovernment Bonds: 10%\nGold: 10%\n\n"
        "A balance of growth and safety: equity funds and stocks drive returns while deposits and bonds "
        "cushion the bad years."
    ),
    "aggressive": (
        "Stocks: 50%\nEquity Mutual Funds: 25%\nReal Estate: 15%\nGold: 10%\n\n"
        "Built for long horizons: a large equity share aims for the highest growth and accepts "
        "sharp short-term ups and downs."
    ),
}


@register(FLOW_NAME, InvestmentPlanInput, InvestmentPlanOutput)
async def investment_plan_generator(data: InvestmentPlanInput) -> InvestmentPlanOutput:
    return await run_flow(
        FLOW_NAME,
        system=PLAN_SYSTEM,
        template=PLAN_TEMPLATE,
        data=data,
        output_model=InvestmentPlanOutput,
        mock={"plan": _MOCK_PLANS[data.risk_profile]},
    )
