from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Type

from pydantic import BaseModel

from .context import RuleContext
from .models import RuleOutcome


class Rule(ABC):
    rule_id: str
    rule_title: str
    institution: str = ""
    fields: List[str] = []
    config_model: Optional[Type[BaseModel]] = None

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    @abstractmethod
    def evaluate(self, ctx: RuleContext) -> List[RuleOutcome]:  # pragma: no cover
        raise NotImplementedError
