from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class FixedValueExpectations(BaseModel):
    # Literals every payment file for the institution must carry verbatim.
    debtor_name: str = "EMSPI"
    debtor_org_id: str = "801567852"
    payment_method: str = "TRF"
    service_level_code: str = "SEPA"
    category_purpose_code: str = "EPAY"
    debtor_iban: str = "GR6001401010101002320023413"
    initiating_party_org_id: str = "AMP203030"
    initiating_party_issuer: str = "Alpha"
    charge_bearer: str = "SLEV"


class InstitutionProfile(BaseModel):
    """Institution-specific constants used by the identifier and fixed-value rules.

    The defaults reproduce the Alpha Bank merchant profile. Load another profile
    with `InstitutionProfile.model_validate(...)` to validate files for a
    different merchant or branch.
    """

    branch_code: str = "14162"
    merchant_code: str = "203030"
    identifier_prefix: str = "AMP"
    # If unset, derived as identifier_prefix + merchant_code + branch_code.
    filename_prefix: Optional[str] = None
    filename_suffix: str = "001_pain001.XML"
    fixed_values: FixedValueExpectations = Field(default_factory=FixedValueExpectations)
    # Optional absolute tolerance for control-sum comparisons. If unset, comparisons are exact.
    ctrl_sum_tolerance: Optional[float] = None

    def resolved_filename_prefix(self) -> str:
        if self.filename_prefix is not None:
            return self.filename_prefix
        return f"{self.identifier_prefix}{self.merchant_code}{self.branch_code}"

    def with_overrides(self, overrides: Dict[str, Any]) -> "InstitutionProfile":
        data = self.model_dump()
        for key, value in overrides.items():
            if key == "fixed_values" and isinstance(value, dict):
                data["fixed_values"].update(value)
            else:
                data[key] = value
        return InstitutionProfile.model_validate(data)
