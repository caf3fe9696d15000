from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny


class Verdict(str, Enum):
    MATCH = "✅ MATCH"
    MISMATCH = "❌ MISMATCH"
    OK = "✅ OK"
    CREATION_EARLIER = "✅ CreDtTm is earlier"
    CREATION_NOT_EARLIER = "❌ CreDtTm is NOT earlier"
    NO_ORG_ID = "✅ No OrgId fields found"
    ORG_ID_PRESENT = "❌ Forbidden OrgId fields present"
    ERROR = "❌ ERROR"

    @property
    def passed(self) -> bool:
        return self.value.startswith("✅")


def match_verdict(passed: bool) -> Verdict:
    return Verdict.MATCH if passed else Verdict.MISMATCH


class RuleOutcome(BaseModel):
    """One entry in a rule's outcome list.

    Field aliases are the wire keys clients already consume, so outcomes are
    always dumped with `by_alias=True`. Absent values are dropped from the
    payload rather than serialized as null.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    validation: Verdict = Field(alias="Validation")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CtrlSumOutcome(RuleOutcome):
    payment_id: Optional[str] = Field(default=None, alias="PaymentID")
    ctrl_sum: float = Field(alias="CtrlSum")
    computed_sum: str = Field(alias="ComputedSum")


class GroupCtrlSumOutcome(RuleOutcome):
    ctrl_sum: float = Field(alias="CtrlSumFromGrpHdr")
    computed_sum: str = Field(alias="ComputedSumOfInstdAmt")


class FixedValueOutcome(RuleOutcome):
    field: str = Field(alias="Field")
    expected: str = Field(alias="Expected")
    actual: Optional[str] = Field(default=None, alias="Actual")


class ComparisonOutcome(RuleOutcome):
    expected: str = Field(alias="Expected")
    actual: str = Field(alias="Actual")


class TransactionComparisonOutcome(ComparisonOutcome):
    transaction: int = Field(alias="Transaction")


class PaymentInfoIdOutcome(ComparisonOutcome):
    payment_id: Optional[str] = Field(default=None, alias="PaymentID")


class DateOrderOutcome(RuleOutcome):
    creation: Optional[str] = Field(default=None, alias="CreDtTm")
    execution: Optional[str] = Field(default=None, alias="ReqdExctnDt")
    error: Optional[str] = Field(default=None, alias="Error")


class ViolationsOutcome(RuleOutcome):
    violations: Optional[List[str]] = Field(default=None, alias="Violations")


OutcomeList = List[SerializeAsAny[RuleOutcome]]


class ValidationReport(BaseModel):
    run_id: str
    generated_at: datetime

    results: Dict[str, OutcomeList] = Field(default_factory=dict)
    totals: Dict[Verdict, int] = Field(default_factory=dict)

    def to_payload(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            rule_id: [outcome.to_payload() for outcome in outcomes]
            for rule_id, outcomes in self.results.items()
        }

    def passed(self) -> bool:
        return all(o.validation.passed for outcomes in self.results.values() for o in outcomes)
