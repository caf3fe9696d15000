import pytest

from common.pain001_rules.errors import InvalidValidateRequest
from common.pain001_rules.models import Verdict
from common.pain001_rules.runner import RulesRunner, validate_document
from common.pain001_rules.xml_tree import parse_xml_bytes

ALL_RULES = [
    "CtrlSumCheck",
    "AlphaCtrlSumCheck",
    "AlphaFixedValueCheck",
    "AlphaEndToEndIdCheck",
    "AlphaPaymentinfIdCheck",
    "AlphaFilenameCheck",
    "AlphaCreationVsExecutionCheck",
    "EurobankNoOrgIdCheck",
    "EurobankEndToEndIdCheck",
]


def test_runner_uses_registration_order():
    assert RulesRunner().rule_ids == ALL_RULES


def test_report_follows_registration_order_not_request_order(make_document):
    report = validate_document(make_document(), ["EurobankNoOrgIdCheck", "CtrlSumCheck"])
    assert list(report.results) == ["CtrlSumCheck", "EurobankNoOrgIdCheck"]


def test_unknown_rules_are_ignored(make_document):
    report = validate_document(make_document(), ["NoSuchRule", "AlphaFilenameCheck"])
    assert list(report.to_payload()) == ["AlphaFilenameCheck"]

    assert validate_document(make_document(), ["NoSuchRule"]).to_payload() == {}


def test_empty_rule_list_yields_empty_report(make_document):
    report = validate_document(make_document(), [])
    assert report.to_payload() == {}
    assert report.totals == {}


@pytest.mark.parametrize("json_data, validations", [(None, ["CtrlSumCheck"]), ({"Document": {}}, None)])
def test_missing_tree_or_rule_list_is_invalid(json_data, validations):
    with pytest.raises(InvalidValidateRequest) as exc_info:
        validate_document(json_data, validations)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Invalid request data"


def test_every_requested_rule_contributes_an_entry_on_empty_tree():
    report = validate_document({}, ALL_RULES)
    assert list(report.results) == ALL_RULES
    assert report.results["CtrlSumCheck"] == []
    assert len(report.results["AlphaFixedValueCheck"]) == 9
    assert report.results["AlphaCreationVsExecutionCheck"][0].validation == Verdict.ERROR


def test_fixture_passes_every_alpha_rule(fixtures_dir):
    raw = parse_xml_bytes((fixtures_dir / "alpha_pain001.xml").read_bytes())
    alpha_rules = [r for r in ALL_RULES if not r.startswith("Eurobank")]
    report = validate_document(raw, alpha_rules, filename="AMP2030301416212345678001_pain001.XML")

    assert report.passed()
    assert report.totals[Verdict.MATCH] == 6
    assert report.totals[Verdict.OK] == 9
    assert report.totals[Verdict.CREATION_EARLIER] == 1


def test_fixture_fails_eurobank_org_id_rule(fixtures_dir):
    raw = parse_xml_bytes((fixtures_dir / "alpha_pain001.xml").read_bytes())
    report = validate_document(raw, ["EurobankNoOrgIdCheck"])
    assert not report.passed()
    assert report.to_payload()["EurobankNoOrgIdCheck"][0]["Violations"] == [
        "InitgPty OrgId",
        "Debtor OrgId",
        "Creditor OrgId",
    ]


def test_single_rule_string_is_accepted(make_document):
    report = validate_document(make_document(), "CtrlSumCheck")
    assert list(report.results) == ["CtrlSumCheck"]


def test_custom_runner(make_document):
    from common.pain001_rules.rules.ctrl_sum_check import CTRL_SUM_CHECK

    runner = RulesRunner(rules=[CTRL_SUM_CHECK()])
    report = validate_document(make_document(), ALL_RULES, runner=runner)
    assert list(report.results) == ["CtrlSumCheck"]
