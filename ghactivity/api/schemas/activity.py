"""Activity report response schemas."""

from __future__ import annotations

from pydantic import BaseModel

from ghactivity.collector.models import Report


class ActivityOut(BaseModel):
    title: str
    url: str


class ReportResponse(BaseModel):
    issues_created: list[ActivityOut]
    prs_reviewed: list[ActivityOut]
    prs_merged: list[ActivityOut]
    commits_created: list[ActivityOut]
    comments: list[ActivityOut]

    @classmethod
    def from_report(cls, report: Report) -> ReportResponse:
        return cls.model_validate(report.to_dict())
