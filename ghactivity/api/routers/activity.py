"""Activity router — one report per user and day."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ghactivity.api.deps import get_aggregator, get_settings
from ghactivity.api.schemas.activity import ReportResponse
from ghactivity.collector.aggregator import Aggregator
from ghactivity.core.config import Settings
from ghactivity.exceptions import UserRequiredError

router = APIRouter()


@router.get("", response_model=ReportResponse)
async def get_activity(
    date: str = Query(..., description="Day to report on, DD-MM-YYYY"),
    user: str | None = Query(None, description="GitHub login (default: $GITHUB_USER)"),
    aggregator: Aggregator = Depends(get_aggregator),
    settings: Settings = Depends(get_settings),
) -> ReportResponse:
    login = user or settings.github_user
    if not login:
        raise UserRequiredError("no user given; pass ?user= or set GITHUB_USER")
    report = await aggregator.fetch(login, date)
    return ReportResponse.from_report(report)
