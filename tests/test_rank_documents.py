import unittest
from datetime import datetime, timezone

from application.use_cases.rank_documents import rank_documents, relevance_score, score_documents
from domain.entities import FacetCategory, Locale
from infrastructure.localization import DictionaryTranslator
from infrastructure.seed import demo_documents
from tests.factories import make_document


def identity(category, value, locale):
    return value


def identity_title(title, locale):
    return title


class TestRelevanceMode(unittest.TestCase):
    def setUp(self) -> None:
        self.translator = DictionaryTranslator()

    def _rank(self, documents, query, locale=Locale.EN):
        return score_documents(documents, query, locale, self.translator.translate, self.translator.translate_title)

    def test_report_example(self):
        documents = [
            make_document("1", title="Executive Committee Meeting Minutes", department="Executive Committee",
                          doc_type="Meeting Minutes"),
            make_document("2", title="Monthly Financial Report", department="Admin & Resources Department",
                          doc_type="Budget Report"),
        ]
        results = self._rank(documents, "report")
        self.assertEqual([item.document.id for item in results], ["2"])
        # title and document type both contain "report"
        self.assertEqual(results[0].score, 5)

    def test_title_only_scores_three(self):
        document = make_document("x", title="Monthly Financial Report", department="Worship Department",
                                 doc_type="Annual Plan")
        self.assertEqual(relevance_score(document, "financial", Locale.EN, identity, identity_title), 3)

    def test_match_everywhere_scores_six(self):
        document = make_document("x", title="Plan of plans", department="Plan Department", doc_type="Annual Plan")
        self.assertEqual(relevance_score(document, "PLAN", Locale.EN, identity, identity_title), 6)

    def test_type_and_department_weights(self):
        document = make_document("x", title="Minutes", department="Missions Department", doc_type="Event Proposal")
        self.assertEqual(relevance_score(document, "proposal", Locale.EN, identity, identity_title), 2)
        self.assertEqual(relevance_score(document, "missions", Locale.EN, identity, identity_title), 1)

    def test_ministry_and_status_are_not_searched(self):
        document = make_document("x", title="Minutes", ministry="Homework Class", status="For Review")
        self.assertEqual(relevance_score(document, "homework", Locale.EN, identity, identity_title), 0)
        self.assertEqual(relevance_score(document, "review", Locale.EN, identity, identity_title), 0)
        self.assertEqual(self._rank([document], "review"), [])

    def test_substring_inside_word_counts(self):
        document = make_document("x", title="Reportedly fine")
        self.assertEqual(relevance_score(document, "port", Locale.EN, identity, identity_title), 3)

    def test_query_is_trimmed_and_case_folded(self):
        document = make_document("x", title="Monthly Financial Report")
        self.assertEqual(relevance_score(document, "  MONTHLY  ", Locale.EN, identity, identity_title), 3)

    def test_sorted_by_score_descending(self):
        documents = [
            make_document("dept", title="Other", department="Missions Department", doc_type="Annual Plan"),
            make_document("title", title="Missions Overview", department="Worship Department", doc_type="Annual Plan"),
            make_document("both", title="Missions Plan", department="Missions Department", doc_type="Annual Plan"),
        ]
        results = self._rank(documents, "missions")
        self.assertEqual([(item.document.id, item.score) for item in results], [("both", 4), ("title", 3), ("dept", 1)])

    def test_ties_keep_input_order_without_recency(self):
        documents = [
            make_document("old", title="Budget A", minutes=0),
            make_document("new", title="Budget B", minutes=60),
            make_document("mid", title="Budget C", minutes=30),
        ]
        for _ in range(3):
            ranked = rank_documents(documents, "budget", Locale.EN, identity, identity_title)
            self.assertEqual([doc.id for doc in ranked], ["old", "new", "mid"])

    def test_missing_translation_falls_back_to_raw_value(self):
        document = make_document("x", title="Monthly Financial Report")
        score = relevance_score(document, "monthly", Locale.ZH, lambda *args: None, lambda *args: "")
        self.assertEqual(score, 3)


class TestLocaleSensitivity(unittest.TestCase):
    def setUp(self) -> None:
        self.translator = DictionaryTranslator()
        self.documents = demo_documents()

    def _ids(self, query, locale):
        ranked = rank_documents(self.documents, query, locale, self.translator.translate,
                                self.translator.translate_title)
        return [doc.id for doc in ranked]

    def test_localized_title_matches_only_in_its_locale(self):
        self.assertEqual(self._ids("財務", Locale.ZH), ["3"])
        self.assertEqual(self._ids("財務", Locale.EN), [])
        self.assertEqual(self._ids("financial", Locale.ZH), [])
        self.assertEqual(self._ids("financial", Locale.EN), ["3"])

    def test_localized_labels_are_scored(self):
        # 宣教部 is the Missions Department label
        ranked = score_documents(self.documents, "宣教", Locale.ZH, self.translator.translate,
                                 self.translator.translate_title)
        self.assertEqual([(item.document.id, item.score) for item in ranked], [("4", 1)])

    def test_rendering_follows_locale_between_calls(self):
        self.assertEqual(self._ids("計劃", Locale.ZH), ["2"])
        self.assertEqual(self._ids("計劃", Locale.EN), [])
        self.assertEqual(self._ids("計劃", Locale.ZH), ["2"])


class TestRecencyMode(unittest.TestCase):
    def test_empty_query_sorts_newest_first(self):
        ranked = rank_documents(demo_documents(), "", Locale.EN, identity, identity_title)
        self.assertEqual([doc.id for doc in ranked], ["4", "2", "3", "1"])

    def test_whitespace_query_is_empty(self):
        results = score_documents(demo_documents(), "   ", Locale.EN, identity, identity_title)
        self.assertEqual([item.document.id for item in results], ["4", "2", "3", "1"])
        self.assertTrue(all(item.score == 0 for item in results))

    def test_repeated_calls_are_identical(self):
        documents = [make_document(str(i), minutes=(i * 7) % 5) for i in range(5)]
        first = rank_documents(documents, "", Locale.EN, identity, identity_title)
        second = rank_documents(documents, "", Locale.EN, identity, identity_title)
        self.assertEqual(first, second)
        stamps = [doc.created_at for doc in first]
        self.assertEqual(stamps, sorted(stamps, reverse=True))

    def test_equal_timestamps_keep_input_order(self):
        stamp = datetime(2024, 6, 1, tzinfo=timezone.utc)
        documents = [
            make_document("a", created_at=stamp),
            make_document("newest", minutes=10**6),
            make_document("b", created_at=stamp),
        ]
        ranked = rank_documents(documents, "", Locale.EN, identity, identity_title)
        self.assertEqual([doc.id for doc in ranked], ["newest", "a", "b"])

    def test_empty_collection(self):
        self.assertEqual(rank_documents([], "", Locale.EN, identity, identity_title), [])
        self.assertEqual(rank_documents([], "report", Locale.EN, identity, identity_title), [])

    def test_translator_category_keys(self):
        translator = DictionaryTranslator()
        self.assertEqual(translator.translate(FacetCategory.DOC_TYPES, "Budget Report", Locale.ZH), "預算報告")


if __name__ == "__main__":
    unittest.main()
