"""Typed views over a normalized pain.001 tree.

Views never copy the tree and never raise on missing data: every property
returns the extracted string or `None`, and collections come back empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Optional

from .tree import NormalizedTree, as_list, extract, first, normalize, resolve

EMPTY_NODE = NormalizedTree(MappingProxyType({}))


def _node(value) -> NormalizedTree:
    value = first(value)
    return value if isinstance(value, NormalizedTree) else EMPTY_NODE


def _nodes(value) -> List[NormalizedTree]:
    return [item for item in as_list(value) if isinstance(item, NormalizedTree)]


@dataclass(frozen=True)
class CreditTransferTransaction:
    node: NormalizedTree
    position: int

    @property
    def instructed_amount(self) -> Optional[str]:
        amount = first(resolve(self.node, "Amt.InstdAmt"))
        if isinstance(amount, NormalizedTree):
            return amount.text
        return extract(self.node, "Amt.InstdAmt")

    @property
    def instruction_id(self) -> Optional[str]:
        return extract(self.node, "PmtId.InstrId")

    @property
    def end_to_end_id(self) -> Optional[str]:
        return extract(self.node, "PmtId.EndToEndId")

    @property
    def creditor_org_id(self) -> Optional[str]:
        return extract(self.node, "Cdtr.Id.OrgId.Othr.Id")

    @property
    def has_creditor_org_id(self) -> bool:
        return resolve(self.node, "Cdtr.Id.OrgId") is not None

    @property
    def creditor_iban(self) -> Optional[str]:
        return extract(self.node, "CdtrAcct.Id.IBAN")


@dataclass(frozen=True)
class PaymentInstruction:
    node: NormalizedTree
    position: int

    @property
    def payment_id(self) -> Optional[str]:
        return extract(self.node, "PmtInfId")

    @property
    def ctrl_sum(self) -> Optional[str]:
        return extract(self.node, "CtrlSum")

    @property
    def requested_execution_date(self) -> Optional[str]:
        # pain.001.001.03 carries a bare date; .09 wraps it in a Dt/DtTm choice.
        value = first(resolve(self.node, "ReqdExctnDt"))
        if isinstance(value, NormalizedTree):
            return extract(value, "Dt") or extract(value, "DtTm")
        return extract(self.node, "ReqdExctnDt")

    @property
    def payment_method(self) -> Optional[str]:
        return extract(self.node, "PmtMtd")

    @property
    def service_level_code(self) -> Optional[str]:
        return extract(self.node, "PmtTpInf.SvcLvl.Cd")

    @property
    def category_purpose_code(self) -> Optional[str]:
        return extract(self.node, "PmtTpInf.CtgyPurp.Cd")

    @property
    def debtor_name(self) -> Optional[str]:
        return extract(self.node, "Dbtr.Nm")

    @property
    def debtor_org_id(self) -> Optional[str]:
        return extract(self.node, "Dbtr.Id.OrgId.Othr.Id")

    @property
    def has_debtor_org_id(self) -> bool:
        return resolve(self.node, "Dbtr.Id.OrgId") is not None

    @property
    def debtor_iban(self) -> Optional[str]:
        return extract(self.node, "DbtrAcct.Id.IBAN")

    @property
    def charge_bearer(self) -> Optional[str]:
        return extract(self.node, "ChrgBr")

    @property
    def transactions(self) -> List[CreditTransferTransaction]:
        return [
            CreditTransferTransaction(node=tx, position=idx)
            for idx, tx in enumerate(_nodes(self.node.get("CdtTrfTxInf")), start=1)
        ]


@dataclass(frozen=True)
class GroupHeader:
    node: NormalizedTree

    @property
    def message_id(self) -> Optional[str]:
        return extract(self.node, "MsgId")

    @property
    def creation_date_time(self) -> Optional[str]:
        return extract(self.node, "CreDtTm")

    @property
    def ctrl_sum(self) -> Optional[str]:
        return extract(self.node, "CtrlSum")

    @property
    def initiating_party_org_id(self) -> Optional[str]:
        return extract(self.node, "InitgPty.Id.OrgId.Othr.Id")

    @property
    def initiating_party_issuer(self) -> Optional[str]:
        return extract(self.node, "InitgPty.Id.OrgId.Othr.Issr")

    @property
    def has_initiating_party_org_id(self) -> bool:
        return resolve(self.node, "InitgPty.Id.OrgId") is not None


@dataclass(frozen=True)
class PaymentDocument:
    tree: NormalizedTree

    @classmethod
    def from_raw(cls, raw) -> "PaymentDocument":
        return cls(tree=normalize(raw))

    @property
    def initiation(self) -> NormalizedTree:
        return _node(resolve(self.tree, "Document.CstmrCdtTrfInitn"))

    @property
    def group_header(self) -> GroupHeader:
        return GroupHeader(node=_node(self.initiation.get("GrpHdr")))

    @property
    def payment_instructions(self) -> List[PaymentInstruction]:
        return [
            PaymentInstruction(node=pmt, position=idx)
            for idx, pmt in enumerate(_nodes(self.initiation.get("PmtInf")), start=1)
        ]

    @property
    def first_payment_instruction(self) -> Optional[PaymentInstruction]:
        instructions = self.payment_instructions
        return instructions[0] if instructions else None

    def all_transactions(self) -> List[CreditTransferTransaction]:
        return [tx for pmt in self.payment_instructions for tx in pmt.transactions]
