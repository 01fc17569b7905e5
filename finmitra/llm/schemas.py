from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal


RiskTolerance = Literal["Conservative", "Moderate", "Aggressive"]
RiskProfile = Literal["conservative", "moderate", "aggressive"]
RiskLevel = Literal["Low", "Medium", "High"]


class FlowModel(BaseModel):
    """Flow payloads travel as camelCase JSON; attributes stay snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    def wire(self) -> dict:
        return self.model_dump(by_alias=True)


# Investment guidance

class InvestmentGuidanceInput(FlowModel):
    age: float = Field(..., description="The age of the user.")
    income: float = Field(..., description="The annual income of the user in INR.")
    risk_tolerance: RiskTolerance = Field(..., description="The risk tolerance of the user.")
    financial_goals: str = Field(
        ..., description="The financial goals of the user, e.g., retirement, buying a house, etc."
    )
    investment_amount: float = Field(
        ..., description="The amount the user wants to invest per month in INR."
    )
    time_horizon: str = Field(
        ..., description="The time horizon for the investment in years, e.g., 5 years, 10 years, etc."
    )
    dependents: int = Field(..., description="The number of dependents the user has.")
    debt: float = Field(..., description="The amount of debt the user has in INR.")

class InvestmentOption(FlowModel):
    name: str = Field(..., description="The name of the investment option.")
    description: str = Field(..., description="A brief description of the investment option.")
    risk_level: RiskLevel = Field(..., description="The risk level of the investment option.")
    expected_return: str = Field(..., description="The expected return on the investment option.")
    suitability: str = Field(..., description="Why this investment option is suitable for the user.")

class InvestmentGuidanceOutput(FlowModel):
    investment_options: List[InvestmentOption] = Field(
        ..., description="A list of investment options suitable for the user."
    )
    disclaimer: str = Field(..., description="A disclaimer about investment risks.")


# Investment plan

class InvestmentPlanInput(FlowModel):
    risk_profile: RiskProfile = Field(..., description="The risk profile of the user.")

class InvestmentPlanOutput(FlowModel):
    plan: str = Field(
        ...,
        description=(
            "A personalized investment plan based on the user provided risk profile. "
            "It lists several investment options with the percentage of investment to allocate "
            "to each, and explains the reasoning behind the plan."
        ),
    )


# Financial dictionary

class SimplifyFinancialConceptInput(FlowModel):
    concept: str = Field(..., description="The financial concept to simplify.")

class SimplifyFinancialConceptOutput(FlowModel):
    simplified_explanation: str = Field(
        ..., description="A simplified explanation of the financial concept."
    )
