from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _load_profile(path: Path | None):
    from common.pain001_rules.config import InstitutionProfile

    if path is None:
        return InstitutionProfile()
    with path.open() as handle:
        return InstitutionProfile.model_validate(json.load(handle))


def _write_markdown(report, source: Path, out_path: Path) -> None:
    lines = [
        f"# pain.001 validation: {source.name}",
        "",
        f"Generated at: {report.generated_at.isoformat()}",
        "",
        "## Totals",
    ]
    for verdict, count in report.totals.items():
        lines.append(f"- {verdict.value}: {count}")
    lines.append("")
    lines.append("## Results")
    for rule_id, outcomes in report.results.items():
        lines.append("")
        lines.append(f"### {rule_id}")
        if not outcomes:
            lines.append("- (no outcomes)")
        for outcome in outcomes:
            payload = outcome.to_payload()
            verdict = payload.pop("Validation")
            extras = ", ".join(f"{key}={value}" for key, value in payload.items())
            lines.append(f"- {verdict}" + (f" | {extras}" if extras else ""))
    out_path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def run_validation_file(
    xml_path: Path,
    *,
    rules: list[str] | None = None,
    filename: str | None = None,
    profile_path: Path | None = None,
):
    from common.pain001_rules import RulesRunner, parse_xml_bytes, validate_document

    raw = parse_xml_bytes(xml_path.read_bytes())
    runner = RulesRunner()
    return validate_document(
        raw,
        rules if rules is not None else runner.rule_ids,
        filename=filename if filename is not None else xml_path.name,
        profile=_load_profile(profile_path),
        runner=runner,
    )


def main(argv: list[str] | None = None) -> int:
    _ensure_backend_on_path()
    from common.pain001_rules import Pain001Error

    parser = argparse.ArgumentParser(description="Validate a pain.001 XML file and print the rule report.")
    parser.add_argument("xml_file", help="Path to the pain.001 XML file.")
    parser.add_argument(
        "--rule",
        action="append",
        dest="rules",
        default=None,
        help="Rule name to run (repeatable). Defaults to every registered rule.",
    )
    parser.add_argument(
        "--filename",
        default=None,
        help="Filename to check against the filename rules (defaults to the XML file's name).",
    )
    parser.add_argument("--profile", default=None, help="Path to an institution profile JSON file.")
    parser.add_argument("--markdown", default=None, help="Also write a Markdown report to this path.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any outcome is not a passing verdict.",
    )
    args = parser.parse_args(argv)

    xml_path = Path(args.xml_file).resolve()
    if not xml_path.exists():
        raise SystemExit(f"XML file not found: {xml_path}")

    try:
        report = run_validation_file(
            xml_path,
            rules=args.rules,
            filename=args.filename,
            profile_path=Path(args.profile).resolve() if args.profile else None,
        )
    except Pain001Error as exc:
        print(json.dumps({"error": exc.message, "detail": exc.detail}), file=sys.stderr)
        return 2

    print(json.dumps(report.to_payload(), indent=2, ensure_ascii=False))
    if args.markdown:
        _write_markdown(report, xml_path, Path(args.markdown))

    if args.strict and not report.passed():
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
