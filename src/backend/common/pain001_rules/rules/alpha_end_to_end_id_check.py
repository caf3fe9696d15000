from __future__ import annotations

from typing import List

from ..composers import end_to_end_id
from ..context import RuleContext
from ..models import RuleOutcome, TransactionComparisonOutcome, match_verdict
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ALPHA_END_TO_END_ID_CHECK(Rule):
    rule_id = "AlphaEndToEndIdCheck"
    rule_title = "End-to-end ids follow creditor OrgId + InstrId + MsgId[-8:] + IBAN[-5:]"
    institution = "Alpha Bank"
    fields = [
        "GrpHdr.MsgId",
        "PmtInf.CdtTrfTxInf.Cdtr.Id.OrgId.Othr.Id",
        "PmtInf.CdtTrfTxInf.PmtId.InstrId",
        "PmtInf.CdtTrfTxInf.PmtId.EndToEndId",
        "PmtInf.CdtTrfTxInf.CdtrAcct.Id.IBAN",
    ]

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        pmt = ctx.document.first_payment_instruction
        if pmt is None:
            return []

        msg_id = ctx.message_id
        outcomes: List[RuleOutcome] = []
        for tx in pmt.transactions:
            expected = end_to_end_id(tx.creditor_org_id, tx.instruction_id, msg_id, tx.creditor_iban)
            actual = tx.end_to_end_id or ""
            outcomes.append(
                TransactionComparisonOutcome(
                    transaction=tx.position,
                    expected=expected,
                    actual=actual,
                    validation=match_verdict(actual == expected),
                )
            )
        return outcomes
