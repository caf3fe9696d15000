"""Rules engine for SEPA Credit Transfer Initiation (pain.001) files.

This package contains only domain logic:
- Rule inputs are the XML-derived tree, the caller's filename and an institution profile.
- No HTTP, multipart or file-system handling lives here.
"""

from .config import FixedValueExpectations, InstitutionProfile
from .context import RuleContext
from .document import PaymentDocument
from .errors import (
    InvalidValidateRequest,
    MissingRequiredField,
    MissingUpload,
    Pain001Error,
    XmlParseError,
)
from .models import RuleOutcome, ValidationReport, Verdict
from .runner import RulesRunner, validate_document
from .tree import NormalizedTree, as_list, extract, normalize
from .xml_tree import parse_xml_bytes

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
