from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional

from .config import InstitutionProfile
from .errors import MissingRequiredField

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CENTS = Decimal("0.01")


def parse_amount(value: Any) -> float:
    """Parse the leading decimal number of `value`; absent or unparsable amounts count as 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return 0.0
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return 0.0
    return float(match.group(1))


def sum_amounts(values: Iterable[Any]) -> float:
    # Accumulate left to right in binary floating point; math.fsum would change
    # which control sums compare equal.
    total = 0.0
    for value in values:
        total += parse_amount(value)
    return total


def format_amount(total: float) -> str:
    if not math.isfinite(total):
        return str(total)
    # Round the exact binary value half-up, matching how clients render amounts.
    return str(Decimal(total).quantize(_CENTS, rounding=ROUND_HALF_UP))


def amounts_match(declared: float, computed: float, tolerance: Optional[float] = None) -> bool:
    if tolerance is None:
        return declared == computed
    return abs(declared - computed) <= tolerance


def last_n(value: Optional[str], n: int) -> str:
    if not value or n <= 0:
        return ""
    return value[-n:]


def end_to_end_id(
    creditor_org_id: Optional[str],
    instruction_id: Optional[str],
    message_id: Optional[str],
    creditor_iban: Optional[str],
) -> str:
    return f"{creditor_org_id or ''}{instruction_id or ''}{last_n(message_id, 8)}{last_n(creditor_iban, 5)}"


def payment_information_id(message_id: Optional[str], profile: InstitutionProfile) -> str:
    return f"{profile.identifier_prefix}{profile.branch_code}{profile.merchant_code}{last_n(message_id, 8)}"


def expected_filename(message_id: Optional[str], profile: InstitutionProfile) -> str:
    return f"{profile.resolved_filename_prefix()}{last_n(message_id, 8)}{profile.filename_suffix}"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO date or date-time. Aware values are converted to naive UTC."""
    text = value.strip()
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def creation_precedes_execution(creation: Optional[str], execution: Optional[str]) -> bool:
    missing = [name for name, value in (("CreDtTm", creation), ("ReqdExctnDt", execution)) if not value]
    if missing:
        raise MissingRequiredField(*missing)
    return parse_timestamp(creation) < parse_timestamp(execution)
