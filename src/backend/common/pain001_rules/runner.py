from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from .config import InstitutionProfile
from .context import RuleContext
from .errors import InvalidValidateRequest
from .models import ValidationReport, Verdict
from .registry import registry

logger = logging.getLogger(__name__)


class RulesRunner:
    def __init__(self, rules: Optional[Iterable] = None):
        self._rules = list(rules) if rules is not None else registry.create_all()

    @property
    def rule_ids(self) -> list[str]:
        return [rule.rule_id for rule in self._rules]

    def run(self, ctx: RuleContext, *, rule_ids: Optional[Iterable[str]] = None) -> ValidationReport:
        requested = set(rule_ids) if rule_ids is not None else None
        if requested:
            unknown = sorted(requested.difference(self.rule_ids))
            if unknown:
                logger.debug("Ignoring unknown rules: %s", ", ".join(unknown))

        results = {}
        for rule in self._rules:
            if requested is not None and rule.rule_id not in requested:
                continue
            results[rule.rule_id] = list(rule.evaluate(ctx))

        totals: dict[Verdict, int] = {}
        for outcomes in results.values():
            for outcome in outcomes:
                totals[outcome.validation] = totals.get(outcome.validation, 0) + 1

        logger.debug("Evaluated %d rule(s): %s", len(results), ", ".join(results))
        return ValidationReport(
            run_id=str(uuid.uuid4()),
            generated_at=datetime.now(timezone.utc),
            results=results,
            totals=totals,
        )


def validate_document(
    json_data: Any,
    validations: Optional[Iterable[str]],
    *,
    filename: Optional[str] = None,
    profile: Optional[InstitutionProfile] = None,
    runner: Optional[RulesRunner] = None,
) -> ValidationReport:
    """Run the requested rules against a raw (un-normalized) tree.

    Rules run in registration order regardless of request order; unknown rule
    names are ignored and an empty request yields an empty report.
    """
    if json_data is None or validations is None:
        raise InvalidValidateRequest()
    if isinstance(validations, str):
        validations = [validations]
    ctx = RuleContext.from_raw(json_data, filename=filename, profile=profile)
    return (runner or RulesRunner()).run(ctx, rule_ids=validations)
