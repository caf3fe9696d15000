from __future__ import annotations

from typing import List

from ..composers import amounts_match, format_amount, parse_amount, sum_amounts
from ..config import InstitutionProfile
from ..context import RuleContext
from ..models import CtrlSumOutcome, RuleOutcome, match_verdict
from ..registry import register_rule
from ..rule import Rule


@register_rule
class CTRL_SUM_CHECK(Rule):
    rule_id = "CtrlSumCheck"
    rule_title = "Each payment instruction's control sum equals its instructed amounts"
    institution = "SEPA"
    fields = ["PmtInf.CtrlSum", "PmtInf.CdtTrfTxInf.Amt.InstdAmt"]
    config_model = InstitutionProfile

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        tolerance = ctx.profile.ctrl_sum_tolerance
        outcomes: List[RuleOutcome] = []
        for pmt in ctx.document.payment_instructions:
            computed = sum_amounts(tx.instructed_amount for tx in pmt.transactions)
            declared = parse_amount(pmt.ctrl_sum)
            outcomes.append(
                CtrlSumOutcome(
                    payment_id=pmt.payment_id,
                    ctrl_sum=declared,
                    computed_sum=format_amount(computed),
                    validation=match_verdict(amounts_match(declared, computed, tolerance)),
                )
            )
        return outcomes
