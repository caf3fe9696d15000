from __future__ import annotations

from typing import List

from ..context import RuleContext
from ..models import RuleOutcome, Verdict, ViolationsOutcome
from ..registry import register_rule
from ..rule import Rule

INITIATING_PARTY = "InitgPty OrgId"
DEBTOR = "Debtor OrgId"
CREDITOR = "Creditor OrgId"


@register_rule
class EUROBANK_NO_ORG_ID_CHECK(Rule):
    rule_id = "EurobankNoOrgIdCheck"
    rule_title = "No organisation identifiers on initiating party, debtor or creditors"
    institution = "Eurobank"
    fields = ["GrpHdr.InitgPty.Id.OrgId", "PmtInf.Dbtr.Id.OrgId", "PmtInf.CdtTrfTxInf.Cdtr.Id.OrgId"]

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        doc = ctx.document
        instructions = doc.payment_instructions

        violations: List[str] = []
        if doc.group_header.has_initiating_party_org_id:
            violations.append(INITIATING_PARTY)
        if any(pmt.has_debtor_org_id for pmt in instructions):
            violations.append(DEBTOR)
        if any(tx.has_creditor_org_id for tx in doc.all_transactions()):
            violations.append(CREDITOR)

        if not violations:
            return [ViolationsOutcome(validation=Verdict.NO_ORG_ID)]
        return [ViolationsOutcome(validation=Verdict.ORG_ID_PRESENT, violations=violations)]
