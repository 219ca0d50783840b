"""Demonstration documents loaded into a fresh catalog."""
from __future__ import annotations

from datetime import datetime, timezone

from domain.entities import Attachment, Document

_PLACEHOLDER = Attachment(filename="dummy.txt", content_type="text/plain", data=b"dummy content")


def demo_documents() -> list[Document]:
    return [
        Document(
            id="1",
            title="Executive Committee Meeting Minutes",
            attachment=_PLACEHOLDER,
            department="Executive Committee",
            ministry="General",
            doc_type="Meeting Minutes",
            year=2023,
            status="Final",
            created_at=datetime(2023, 3, 15, tzinfo=timezone.utc),
        ),
        Document(
            id="2",
            title="Pastoral Dept. (Children) 2024 Annual Plan",
            attachment=_PLACEHOLDER,
            department="Pastoral Department (Children Zone)",
            ministry="General",
            doc_type="Annual Plan",
            year=2024,
            status="Draft",
            created_at=datetime(2024, 1, 20, tzinfo=timezone.utc),
        ),
        Document(
            id="3",
            title="Monthly Financial Report",
            attachment=_PLACEHOLDER,
            department="Admin & Resources Department",
            ministry="General",
            doc_type="Budget Report",
            year=2023,
            status="For Review",
            created_at=datetime(2023, 11, 5, tzinfo=timezone.utc),
        ),
        Document(
            id="4",
            title="Short-term Mission Proposal",
            attachment=_PLACEHOLDER,
            department="Missions Department",
            ministry="Short-term Mission",
            doc_type="Event Proposal",
            year=2024,
            status="Draft",
            created_at=datetime(2024, 5, 10, tzinfo=timezone.utc),
        ),
    ]


__all__ = ["demo_documents"]
