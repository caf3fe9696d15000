from __future__ import annotations

from typing import List

from ..composers import creation_precedes_execution
from ..context import RuleContext
from ..errors import MissingRequiredField
from ..models import DateOrderOutcome, RuleOutcome, Verdict
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ALPHA_CREATION_VS_EXECUTION_CHECK(Rule):
    rule_id = "AlphaCreationVsExecutionCheck"
    rule_title = "File creation timestamp precedes the requested execution date"
    institution = "Alpha Bank"
    fields = ["GrpHdr.CreDtTm", "PmtInf.ReqdExctnDt"]

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        creation = ctx.document.group_header.creation_date_time
        pmt = ctx.document.first_payment_instruction
        execution = pmt.requested_execution_date if pmt else None

        try:
            earlier = creation_precedes_execution(creation, execution)
        except MissingRequiredField as exc:
            return [DateOrderOutcome(creation=creation, execution=execution, error=exc.message, validation=Verdict.ERROR)]
        except ValueError as exc:
            return [
                DateOrderOutcome(
                    creation=creation,
                    execution=execution,
                    error=f"Unparseable date: {exc}",
                    validation=Verdict.ERROR,
                )
            ]

        return [
            DateOrderOutcome(
                creation=creation,
                execution=execution,
                validation=Verdict.CREATION_EARLIER if earlier else Verdict.CREATION_NOT_EARLIER,
            )
        ]
