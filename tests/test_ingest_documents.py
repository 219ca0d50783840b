import unittest
from datetime import datetime, timedelta, timezone

from application.use_cases.ingest_documents import add_document
from domain.entities import Attachment, DocumentDraft
from domain.errors import InvalidDocumentError, InvalidFacetValueError
from infrastructure.repositories import InMemoryDocumentRepository
from infrastructure.vocabulary import DEFAULT_VOCABULARY

FIXED_TIME = datetime(2025, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_draft(**overrides) -> DocumentDraft:
    fields = {
        "title": "Worship Rota",
        "attachment": Attachment(filename="rota.pdf", content_type="application/pdf", data=b"%PDF-1.4"),
        "department": "Worship Department",
        "ministry": "General",
        "doc_type": "Project Plan",
        "year": 2025,
        "status": "Draft",
    }
    fields.update(overrides)
    return DocumentDraft(**fields)


class TestAddDocument(unittest.TestCase):
    def setUp(self) -> None:
        self.repository = InMemoryDocumentRepository()

    def test_assigns_id_and_timestamp(self):
        document = add_document(
            make_draft(),
            document_repository=self.repository,
            vocabulary=DEFAULT_VOCABULARY,
            clock=lambda: FIXED_TIME,
        )
        self.assertTrue(document.id.startswith("doc_"))
        self.assertEqual(document.created_at, FIXED_TIME)
        self.assertEqual(self.repository.get(document.id), document)
        self.assertEqual(document.attachment.size, 8)

    def test_ids_are_unique(self):
        ids = {add_document(make_draft(), document_repository=self.repository).id for _ in range(20)}
        self.assertEqual(len(ids), 20)
        self.assertEqual(len(self.repository), 20)

    def test_default_clock_is_timezone_aware(self):
        document = add_document(make_draft(), document_repository=self.repository)
        self.assertIsNotNone(document.created_at.tzinfo)

    def test_requires_title(self):
        with self.assertRaises(InvalidDocumentError):
            add_document(make_draft(title="   "), document_repository=self.repository)
        self.assertEqual(len(self.repository), 0)

    def test_requires_attachment(self):
        with self.assertRaises(InvalidDocumentError):
            add_document(make_draft(attachment=None), document_repository=self.repository)
        with self.assertRaises(InvalidDocumentError):
            add_document(make_draft(attachment=Attachment(filename="empty.txt")), document_repository=self.repository)

    def test_rejects_values_outside_vocabulary(self):
        with self.assertRaises(InvalidFacetValueError) as ctx:
            add_document(
                make_draft(ministry="Choir"),
                document_repository=self.repository,
                vocabulary=DEFAULT_VOCABULARY,
            )
        self.assertEqual(ctx.exception.facet, "ministry")

    def test_rejects_naive_clock(self):
        with self.assertRaises(InvalidDocumentError):
            add_document(make_draft(), document_repository=self.repository, clock=lambda: datetime(2025, 1, 1))
        self.assertEqual(len(self.repository), 0)

    def test_aware_clock_is_stored_as_utc(self):
        plus_eight = timezone(timedelta(hours=8))
        document = add_document(
            make_draft(),
            document_repository=self.repository,
            clock=lambda: datetime(2025, 1, 1, 8, 0, tzinfo=plus_eight),
        )
        self.assertEqual(document.created_at, datetime(2025, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(document.created_at.utcoffset(), timedelta(0))

    def test_rejects_non_integer_year(self):
        with self.assertRaises(InvalidFacetValueError):
            add_document(make_draft(year="2025"), document_repository=self.repository)


if __name__ == "__main__":
    unittest.main()
