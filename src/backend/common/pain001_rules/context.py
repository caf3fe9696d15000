from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .config import InstitutionProfile
from .document import PaymentDocument


@dataclass(frozen=True)
class RuleContext:
    document: PaymentDocument
    filename: Optional[str] = None
    profile: InstitutionProfile = field(default_factory=InstitutionProfile)

    @classmethod
    def from_raw(
        cls,
        raw: Any,
        *,
        filename: Optional[str] = None,
        profile: Optional[InstitutionProfile] = None,
    ) -> "RuleContext":
        return cls(
            document=PaymentDocument.from_raw(raw),
            filename=filename,
            profile=profile or InstitutionProfile(),
        )

    @property
    def message_id(self) -> Optional[str]:
        return self.document.group_header.message_id
