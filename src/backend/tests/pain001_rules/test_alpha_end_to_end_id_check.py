from common.pain001_rules.models import Verdict
from common.pain001_rules.rules.alpha_end_to_end_id_check import ALPHA_END_TO_END_ID_CHECK


def test_end_to_end_id_match(make_document, make_ctx):
    (res,) = ALPHA_END_TO_END_ID_CHECK().evaluate(make_ctx(tree=make_document()))
    assert res.to_payload() == {
        "Transaction": 1,
        "Expected": "ORG1INSTR11234567823413",
        "Actual": "ORG1INSTR11234567823413",
        "Validation": "✅ MATCH",
    }


def test_end_to_end_id_one_outcome_per_transaction_of_first_instruction(
    make_document, make_payment, make_transaction, make_ctx
):
    first = make_payment(
        transactions=[
            make_transaction(),
            make_transaction(org_id="ORG2", instr_id="INSTR2", iban="DE89370400440532013000", end_to_end_id="WRONG"),
        ]
    )
    second = make_payment(transactions=[make_transaction(end_to_end_id="IGNORED")])
    results = ALPHA_END_TO_END_ID_CHECK().evaluate(make_ctx(tree=make_document(payments=[first, second])))

    assert [r.transaction for r in results] == [1, 2]
    assert results[0].validation == Verdict.MATCH
    assert results[1].validation == Verdict.MISMATCH
    assert results[1].expected == "ORG2INSTR21234567813000"
    assert results[1].actual == "WRONG"


def test_end_to_end_id_missing_components_contribute_empty_strings(
    make_document, make_payment, make_transaction, make_ctx
):
    tx = make_transaction(org_id=None, instr_id=None, end_to_end_id=None)
    (res,) = ALPHA_END_TO_END_ID_CHECK().evaluate(
        make_ctx(tree=make_document(payments=[make_payment(transactions=[tx])]))
    )
    assert res.expected == "1234567823413"
    assert res.actual == ""
    assert res.validation == Verdict.MISMATCH


def test_end_to_end_id_without_payment_instructions(make_document, make_ctx):
    assert ALPHA_END_TO_END_ID_CHECK().evaluate(make_ctx(tree=make_document(payments=[]))) == []
