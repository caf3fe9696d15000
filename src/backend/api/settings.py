from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv

from common.pain001_rules.config import InstitutionProfile


load_dotenv()

_PROFILE_ENV_OVERRIDES = (
    ("PAIN001_BRANCH_CODE", "branch_code"),
    ("PAIN001_MERCHANT_CODE", "merchant_code"),
    ("PAIN001_IDENTIFIER_PREFIX", "identifier_prefix"),
    ("PAIN001_FILENAME_PREFIX", "filename_prefix"),
    ("PAIN001_FILENAME_SUFFIX", "filename_suffix"),
)


def load_institution_profile() -> InstitutionProfile:
    """
    Build the institution profile from environment variables.

    Reads PAIN001_PROFILE_PATH (a JSON profile file) first, then applies the
    single-value overrides PAIN001_BRANCH_CODE, PAIN001_MERCHANT_CODE,
    PAIN001_IDENTIFIER_PREFIX, PAIN001_FILENAME_PREFIX, PAIN001_FILENAME_SUFFIX
    and PAIN001_CTRL_SUM_TOLERANCE.
    """
    profile = InstitutionProfile()
    profile_path = os.getenv("PAIN001_PROFILE_PATH", "").strip()
    if profile_path:
        path = Path(profile_path)
        if not path.exists():
            raise ValueError(f"PAIN001_PROFILE_PATH does not exist: {profile_path}")
        with path.open() as handle:
            profile = InstitutionProfile.model_validate(json.load(handle))

    overrides: Dict[str, Any] = {}
    for env_name, key in _PROFILE_ENV_OVERRIDES:
        value = os.getenv(env_name, "").strip()
        if value:
            overrides[key] = value
    tolerance = os.getenv("PAIN001_CTRL_SUM_TOLERANCE", "").strip()
    if tolerance:
        overrides["ctrl_sum_tolerance"] = tolerance

    return profile.with_overrides(overrides) if overrides else profile


@lru_cache(maxsize=1)
def get_institution_profile() -> InstitutionProfile:
    return load_institution_profile()


def get_cors_origins() -> List[str]:
    raw = os.getenv("PAIN001_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]
