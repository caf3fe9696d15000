from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .registry import registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    rule_id: str
    rule_title: str
    institution: str = ""
    fields: List[str] = Field(default_factory=list)

    module: str
    class_name: str

    config_model: str = ""
    config_schema: Dict[str, Any] = Field(default_factory=dict)


def build_catalog() -> List[RuleCatalogEntry]:
    """Registered rules in evaluation order."""
    entries: List[RuleCatalogEntry] = []
    for rule_id in registry.ids():
        rule_cls = registry.get(rule_id)
        cfg_model = getattr(rule_cls, "config_model", None)
        entries.append(
            RuleCatalogEntry(
                rule_id=rule_id,
                rule_title=getattr(rule_cls, "rule_title", ""),
                institution=getattr(rule_cls, "institution", ""),
                fields=list(getattr(rule_cls, "fields", []) or []),
                module=getattr(rule_cls, "__module__", ""),
                class_name=getattr(rule_cls, "__name__", ""),
                config_model=cfg_model.__name__ if cfg_model is not None else "",
                config_schema=cfg_model.model_json_schema() if cfg_model is not None else {},
            )
        )
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, ensure_ascii=False)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as exc:
        raise SystemExit(
            "PyYAML is required for YAML output. Install the `catalog` extra (pip install -e '.[catalog]')."
        ) from exc

    return yaml.safe_dump(catalog, sort_keys=False, allow_unicode=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="List the registered pain.001 validation rules.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="json",
        help="Output format (default: json).",
    )
    args = parser.parse_args(argv)

    catalog = [e.model_dump() for e in build_catalog()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
