from common.pain001_rules.models import Verdict
from common.pain001_rules.rules.alpha_filename_check import ALPHA_FILENAME_CHECK


def test_filename_match(make_document, make_ctx):
    ctx = make_ctx(tree=make_document(), filename="AMP2030301416212345678001_pain001.XML")
    (res,) = ALPHA_FILENAME_CHECK().evaluate(ctx)
    assert res.to_payload() == {
        "Expected": "AMP2030301416212345678001_pain001.XML",
        "Actual": "AMP2030301416212345678001_pain001.XML",
        "Validation": "✅ MATCH",
    }


def test_filename_is_case_sensitive(make_document, make_ctx):
    ctx = make_ctx(tree=make_document(), filename="AMP2030301416212345678001_pain001.xml")
    (res,) = ALPHA_FILENAME_CHECK().evaluate(ctx)
    assert res.validation == Verdict.MISMATCH


def test_filename_missing(make_document, make_ctx):
    (res,) = ALPHA_FILENAME_CHECK().evaluate(make_ctx(tree=make_document()))
    assert res.actual == ""
    assert res.validation == Verdict.MISMATCH


def test_filename_short_message_id(make_document, make_ctx):
    ctx = make_ctx(tree=make_document(msg_id="M1"), filename="AMP20303014162M1001_pain001.XML")
    (res,) = ALPHA_FILENAME_CHECK().evaluate(ctx)
    assert res.validation == Verdict.MATCH
