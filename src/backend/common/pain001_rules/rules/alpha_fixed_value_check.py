from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import FixedValueExpectations
from ..context import RuleContext
from ..document import EMPTY_NODE, PaymentInstruction
from ..models import FixedValueOutcome, RuleOutcome, Verdict
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ALPHA_FIXED_VALUE_CHECK(Rule):
    rule_id = "AlphaFixedValueCheck"
    rule_title = "Institution-mandated literals are present verbatim"
    institution = "Alpha Bank"
    fields = [
        "PmtInf.Dbtr.Nm",
        "PmtInf.Dbtr.Id.OrgId.Othr.Id",
        "PmtInf.PmtMtd",
        "PmtInf.PmtTpInf.SvcLvl.Cd",
        "PmtInf.PmtTpInf.CtgyPurp.Cd",
        "PmtInf.DbtrAcct.Id.IBAN",
        "GrpHdr.InitgPty.Id.OrgId.Othr.Id",
        "GrpHdr.InitgPty.Id.OrgId.Othr.Issr",
        "PmtInf.ChrgBr",
    ]
    config_model = FixedValueExpectations

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        expected = ctx.profile.fixed_values
        grp_hdr = ctx.document.group_header
        # Only the first payment instruction is checked.
        pmt = ctx.document.first_payment_instruction or PaymentInstruction(node=EMPTY_NODE, position=0)

        checks: List[Tuple[str, str, Optional[str]]] = [
            ("Dbtr Name", expected.debtor_name, pmt.debtor_name),
            ("Dbtr ID", expected.debtor_org_id, pmt.debtor_org_id),
            ("PmtMtd", expected.payment_method, pmt.payment_method),
            ("SvcLvl Code", expected.service_level_code, pmt.service_level_code),
            ("CtgyPurp Code", expected.category_purpose_code, pmt.category_purpose_code),
            ("IBAN", expected.debtor_iban, pmt.debtor_iban),
            ("InitgPty ID", expected.initiating_party_org_id, grp_hdr.initiating_party_org_id),
            ("InitgPty Issr", expected.initiating_party_issuer, grp_hdr.initiating_party_issuer),
            ("ChrgBr", expected.charge_bearer, pmt.charge_bearer),
        ]
        return [
            FixedValueOutcome(
                field=label,
                expected=want,
                actual=got,
                validation=Verdict.OK if got == want else Verdict.MISMATCH,
            )
            for label, want, got in checks
        ]
