from __future__ import annotations

from typing import List

from ..composers import expected_filename
from ..config import InstitutionProfile
from ..context import RuleContext
from ..models import ComparisonOutcome, RuleOutcome, match_verdict
from ..registry import register_rule
from ..rule import Rule


@register_rule
class EUROBANK_END_TO_END_ID_CHECK(Rule):
    rule_id = "EurobankEndToEndIdCheck"
    rule_title = "Eurobank end-to-end id check"
    institution = "Eurobank"
    fields = ["GrpHdr.MsgId", "filename"]
    config_model = InstitutionProfile

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        # TODO: confirm the Eurobank end-to-end formula with the bank; this
        # currently compares the filename formula against the uploaded filename.
        expected = expected_filename(ctx.message_id, ctx.profile)
        actual = ctx.filename or ""
        return [
            ComparisonOutcome(
                expected=expected,
                actual=actual,
                validation=match_verdict(actual == expected),
            )
        ]
