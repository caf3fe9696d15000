from __future__ import annotations

from typing import List

from ..composers import payment_information_id
from ..config import InstitutionProfile
from ..context import RuleContext
from ..models import PaymentInfoIdOutcome, RuleOutcome, match_verdict
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ALPHA_PAYMENTINF_ID_CHECK(Rule):
    rule_id = "AlphaPaymentinfIdCheck"
    rule_title = "Payment information id follows prefix + branch + merchant + MsgId[-8:]"
    institution = "Alpha Bank"
    fields = ["GrpHdr.MsgId", "PmtInf.PmtInfId"]
    config_model = InstitutionProfile

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        pmt = ctx.document.first_payment_instruction
        expected = payment_information_id(ctx.message_id, ctx.profile)
        actual = (pmt.payment_id if pmt else None) or ""
        return [
            PaymentInfoIdOutcome(
                expected=expected,
                actual=actual,
                validation=match_verdict(actual == expected),
            )
        ]
