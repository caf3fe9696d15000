from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, File, UploadFile
from pydantic import BaseModel, ConfigDict, Field

from common.pain001_rules import (
    InstitutionProfile,
    InvalidValidateRequest,
    MissingUpload,
    parse_xml_bytes,
    validate_document,
)
from common.pain001_rules.catalog import build_catalog

from .settings import get_institution_profile

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pain001"])


class ValidateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    json_data: Optional[Any] = Field(default=None, alias="jsonData")
    validations: Optional[List[str]] = None
    filename: Optional[str] = None


@router.post("/upload")
def upload_pain001(file: Optional[UploadFile] = File(None)):
    if file is None or not file.filename:
        raise MissingUpload()

    data = file.file.read()
    logger.info("Parsing upload %s (%d bytes)", file.filename, len(data))
    tree = parse_xml_bytes(data)
    return {"message": "File processed successfully", "json": tree}


@router.post("/validate")
def validate_pain001(
    payload: Optional[ValidateRequest] = Body(None),
    profile: InstitutionProfile = Depends(get_institution_profile),
):
    if payload is None:
        raise InvalidValidateRequest()

    report = validate_document(
        payload.json_data,
        payload.validations,
        filename=payload.filename,
        profile=profile,
    )
    logger.info(
        "Validated %s: %d rule(s), totals=%s",
        payload.filename or "<no filename>",
        len(report.results),
        {verdict.value: count for verdict, count in report.totals.items()},
    )
    return report.to_payload()


@router.get("/rules")
def list_rules():
    return [entry.model_dump() for entry in build_catalog()]


@router.get("/health")
def health():
    return {"status": "ok"}
