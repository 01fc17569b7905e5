"""
API request and response schemas.
What it defines:
- Form payloads for the three features (same rules for HTML forms and JSON)
- User-facing validation messages
- The action result envelope

And, the main purpose:
Ensure structured communication between client and server.
"""


from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from finmitra.llm.schemas import RiskProfile, RiskTolerance


def _check(ok: bool, code: str, message: str) -> None:
    if not ok:
        raise PydanticCustomError(code, message)


class FormModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        allow_inf_nan=False,
    )


class InvestmentGuidanceForm(FormModel):
    age: float
    income: float
    risk_tolerance: RiskTolerance
    financial_goals: str
    investment_amount: float
    time_horizon: str
    dependents: int = 0
    debt: float = 0

    @field_validator("dependents", "debt", mode="before")
    @classmethod
    def _blank_is_zero(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return 0
        return v

    @field_validator("age")
    @classmethod
    def _age(cls, v: float) -> float:
        _check(v >= 18, "age_min", "Age must be at least 18.")
        _check(v <= 100, "age_max", "Please enter a valid age.")
        return v

    @field_validator("income")
    @classmethod
    def _income(cls, v: float) -> float:
        _check(v >= 0, "income_min", "Income cannot be negative.")
        return v

    @field_validator("financial_goals")
    @classmethod
    def _goals(cls, v: str) -> str:
        _check(len(v) >= 10, "goals_min", "Please describe your financial goals in more detail.")
        _check(len(v) <= 500, "goals_max", "Please keep your financial goals under 500 characters.")
        return v

    @field_validator("investment_amount")
    @classmethod
    def _amount(cls, v: float) -> float:
        _check(v >= 500, "amount_min", "Investment amount must be at least ₹500.")
        return v

    @field_validator("time_horizon")
    @classmethod
    def _horizon(cls, v: str) -> str:
        _check(len(v) >= 1, "horizon_min", "Please provide a time horizon (e.g., '5 years').")
        _check(len(v) <= 50, "horizon_max", "Please keep the time horizon under 50 characters.")
        return v

    @field_validator("dependents")
    @classmethod
    def _dependents(cls, v: int) -> int:
        _check(v >= 0, "dependents_min", "Number of dependents cannot be negative.")
        return v

    @field_validator("debt")
    @classmethod
    def _debt(cls, v: float) -> float:
        _check(v >= 0, "debt_min", "Debt amount cannot be negative.")
        return v


class InvestmentPlanForm(FormModel):
    risk_profile: RiskProfile


class SimplifyConceptForm(FormModel):
    concept: str

    @field_validator("concept")
    @classmethod
    def _concept(cls, v: str) -> str:
        _check(len(v) >= 2, "concept_min", "Concept must be at least 2 characters long.")
        _check(len(v) <= 100, "concept_max", "Concept must be at most 100 characters long.")
        return v


def flatten_errors(exc: ValidationError) -> Dict[str, Any]:
    """Group validation errors as {formErrors: [...], fieldErrors: {field: [...]}}."""
    form_errors: List[str] = []
    field_errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        if loc:
            field_errors.setdefault(str(loc[0]), []).append(err["msg"])
        else:
            form_errors.append(err["msg"])
    return {"formErrors": form_errors, "fieldErrors": field_errors}


class ActionResult(BaseModel):
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    details: Optional[Dict[str, Any]] = Field(None, description="Validation errors, when input was rejected")

    @property
    def ok(self) -> bool:
        return self.error is None
