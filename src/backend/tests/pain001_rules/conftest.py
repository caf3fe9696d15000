import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from pathlib import Path

import pytest

from common.pain001_rules.config import InstitutionProfile
from common.pain001_rules.context import RuleContext

FIXTURES_DIR = Path(__file__).parent / "fixtures"

MSG_ID = "MSGID12345678"
DEBTOR_IBAN = "GR6001401010101002320023413"
ALPHA_PMT_INF_ID = "AMP1416220303012345678"


def _compact(value):
    """Drop None leaves and the empty nodes they leave behind."""
    if isinstance(value, dict):
        out = {}
        for key, item in value.items():
            item = _compact(item)
            if item is None or item == {}:
                continue
            out[key] = item
        return out
    if isinstance(value, list):
        return [_compact(item) for item in value]
    return value


def _one_or_many(items: list, wrap_single: bool):
    if len(items) == 1 and not wrap_single:
        return items[0]
    return items


def prefixed(value, prefix: str):
    """Qualify every element key with `prefix:`, as a prefixed XML document would."""
    if isinstance(value, dict):
        return {
            (key if key in ("_", "Ccy") else f"{prefix}:{key}"): prefixed(item, prefix)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [prefixed(item, prefix) for item in value]
    return value


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def make_transaction():
    def _make(
        *,
        amount="100.00",
        org_id="ORG1",
        instr_id="INSTR1",
        end_to_end_id="ORG1INSTR11234567823413",
        iban=DEBTOR_IBAN,
        currency: str = "EUR",
    ) -> dict:
        return _compact(
            {
                "PmtId": {"InstrId": instr_id, "EndToEndId": end_to_end_id},
                "Amt": {"InstdAmt": {"Ccy": currency, "_": amount} if amount is not None else None},
                "Cdtr": {"Nm": "Creditor Ltd", "Id": {"OrgId": {"Othr": {"Id": org_id}}}},
                "CdtrAcct": {"Id": {"IBAN": iban}},
            }
        )

    return _make


@pytest.fixture
def make_payment(make_transaction):
    def _make(
        *,
        transactions=None,
        ctrl_sum="100.00",
        pmt_inf_id=ALPHA_PMT_INF_ID,
        reqd_exctn_dt="2025-03-02",
        debtor_name="EMSPI",
        debtor_org_id="801567852",
        debtor_iban=DEBTOR_IBAN,
        payment_method="TRF",
        service_level="SEPA",
        category_purpose="EPAY",
        charge_bearer="SLEV",
        wrap_single: bool = False,
    ) -> dict:
        txs = transactions if transactions is not None else [make_transaction()]
        return _compact(
            {
                "PmtInfId": pmt_inf_id,
                "PmtMtd": payment_method,
                "CtrlSum": ctrl_sum,
                "PmtTpInf": {"SvcLvl": {"Cd": service_level}, "CtgyPurp": {"Cd": category_purpose}},
                "ReqdExctnDt": reqd_exctn_dt,
                "Dbtr": {"Nm": debtor_name, "Id": {"OrgId": {"Othr": {"Id": debtor_org_id}}}},
                "DbtrAcct": {"Id": {"IBAN": debtor_iban}},
                "ChrgBr": charge_bearer,
                "CdtTrfTxInf": _one_or_many(txs, wrap_single) if txs else None,
            }
        )

    return _make


@pytest.fixture
def make_document(make_payment):
    def _make(
        *,
        payments=None,
        msg_id=MSG_ID,
        cre_dt_tm="2025-03-01T10:00:00",
        grp_ctrl_sum="100.00",
        initg_org_id="AMP203030",
        initg_issuer="Alpha",
        wrap_single: bool = False,
        prefix: str | None = None,
    ) -> dict:
        pmts = payments if payments is not None else [make_payment()]
        tree = {
            "Document": {
                "xmlns": "urn:iso:std:iso:20022:tech:xsd:pain.001.001.03",
                "CstmrCdtTrfInitn": _compact(
                    {
                        "GrpHdr": {
                            "MsgId": msg_id,
                            "CreDtTm": cre_dt_tm,
                            "NbOfTxs": "1",
                            "CtrlSum": grp_ctrl_sum,
                            "InitgPty": {
                                "Nm": "EMSPI",
                                "Id": {"OrgId": {"Othr": {"Id": initg_org_id, "Issr": initg_issuer}}},
                            },
                        },
                        "PmtInf": _one_or_many(pmts, wrap_single) if pmts else None,
                    }
                ),
            }
        }
        return prefixed(tree, prefix) if prefix else tree

    return _make


@pytest.fixture
def make_ctx():
    def _make(*, tree, filename: str | None = None, profile: InstitutionProfile | None = None) -> RuleContext:
        return RuleContext.from_raw(tree, filename=filename, profile=profile)

    return _make
