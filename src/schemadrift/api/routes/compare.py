# src/schemadrift/api/routes/compare.py

"""
Compare API Routes

Thin HTTP layer over the diff engine: parses the request body and
serializes the ComparisonResult.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException
from opentelemetry import trace
from pydantic import BaseModel, Field

from schemadrift.services.schema_comparator import compare

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)
router = APIRouter()


class CompareRequest(BaseModel):
    old_schema: Optional[Any] = Field(default=None, alias="oldSchema")
    new_schema: Optional[Any] = Field(default=None, alias="newSchema")


class ChangeOut(BaseModel):
    path: str
    type: str
    severity: str
    oldValue: Any = None
    newValue: Any = None
    description: str


class ComparisonResultOut(BaseModel):
    totalChanges: int
    breaking: int
    nonBreaking: int
    changes: List[ChangeOut]
    summary: str


@router.post("/compare", response_model=ComparisonResultOut, response_model_exclude_unset=True)
def compare_documents(payload: CompareRequest):
    """
    Compare two schema documents.

    Both sides are required; OpenAPI / Swagger documents are detected
    automatically and anything else is diffed as plain JSON.
    """
    with tracer.start_as_current_span("api.compare_documents") as span:
        if payload.old_schema is None or payload.new_schema is None:
            span.set_attribute("compare.rejected", True)
            raise HTTPException(
                status_code=400,
                detail="Both oldSchema and newSchema are required",
            )

        result = compare(payload.old_schema, payload.new_schema)
        span.set_attribute("diff.changes_count", result.total_changes)
        logger.info(
            "Compared documents via API: changes=%d breaking=%d",
            result.total_changes,
            result.breaking,
        )
        return result.to_dict()
