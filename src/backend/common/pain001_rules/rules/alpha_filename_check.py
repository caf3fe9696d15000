from __future__ import annotations

from typing import List

from ..composers import expected_filename
from ..config import InstitutionProfile
from ..context import RuleContext
from ..models import ComparisonOutcome, RuleOutcome, match_verdict
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ALPHA_FILENAME_CHECK(Rule):
    rule_id = "AlphaFilenameCheck"
    rule_title = "Uploaded filename follows prefix + MsgId[-8:] + suffix"
    institution = "Alpha Bank"
    fields = ["GrpHdr.MsgId", "filename"]
    config_model = InstitutionProfile

    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:
        expected = expected_filename(ctx.message_id, ctx.profile)
        actual = ctx.filename or ""
        return [
            ComparisonOutcome(
                expected=expected,
                actual=actual,
                validation=match_verdict(actual == expected),
            )
        ]
