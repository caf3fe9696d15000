from __future__ import annotations

from typing import List

from ..composers import amounts_match, format_amount, parse_amount, sum_amounts
from ..config import InstitutionProfile
from ..context import RuleContext
from ..models import GroupCtrlSumOutcome, RuleOutcome, match_verdict
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ALPHA_CTRL_SUM_CHECK(Rule):
    rule_id = "AlphaCtrlSumCheck"
    rule_title = "Group header control sum equals the instructed amounts of every payment instruction"
    institution = "Alpha Bank"
    fields = ["GrpHdr.CtrlSum", "PmtInf.CdtTrfTxInf.Amt.InstdAmt"]
    config_model = InstitutionProfile

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        doc = ctx.document
        computed = sum_amounts(tx.instructed_amount for tx in doc.all_transactions())
        declared = parse_amount(doc.group_header.ctrl_sum)
        matched = amounts_match(declared, computed, ctx.profile.ctrl_sum_tolerance)
        return [
            GroupCtrlSumOutcome(
                ctrl_sum=declared,
                computed_sum=format_amount(computed),
                validation=match_verdict(matched),
            )
        ]
