"""
Unit tests for TF-IDF ranking.
"""

import doctest
import math

import pytest

from docsearch.tfidf import scorer
from docsearch.tfidf.index import InvertedIndex
from docsearch.tfidf.query import Query, parse_query
from docsearch.tfidf.scorer import RelevanceEngine, ScoredDocument, find_top_documents


def build_index(documents):
    index = InvertedIndex()
    for document_id, text in enumerate(documents):
        index.add_document(document_id, text.split())
    return index


def query_of(text):
    return parse_query(text.split())


class TestRelevance:
    """Test score computation"""

    def test_worked_example(self):
        """'a -b' over ['a b c', 'a c', 'b'] leaves only doc 1"""
        index = build_index(["a b c", "a c", "b"])

        results = find_top_documents(query_of("a -b"), index)

        assert [doc.document_id for doc in results] == [1]
        assert results[0].relevance == pytest.approx(0.5 * math.log(1.5))
        assert results[0].relevance == pytest.approx(0.2027, abs=1e-4)

    def test_scores_sum_over_terms(self):
        """Relevance is Σ TF × ln(N / df)"""
        index = build_index([
            "white cat and fashionable collar",
            "fluffy cat fluffy tail",
            "groomed dog expressive eyes",
        ])

        results = find_top_documents(query_of("fluffy groomed cat"), index)

        assert [doc.document_id for doc in results] == [1, 2, 0]
        assert results[0].relevance == pytest.approx(0.5 * math.log(3) + 0.25 * math.log(1.5))
        assert results[1].relevance == pytest.approx(0.25 * math.log(3))
        assert results[2].relevance == pytest.approx(0.2 * math.log(1.5))

    def test_term_in_every_document_scores_zero(self):
        """idf = 0 is valid: documents are returned with relevance 0.0"""
        index = build_index(["a", "a b"])

        results = find_top_documents(query_of("a"), index)

        assert results == [ScoredDocument(0, 0.0), ScoredDocument(1, 0.0)]

    def test_unknown_term_contributes_nothing(self):
        index = build_index(["cat", "dog"])

        results = find_top_documents(query_of("bird cat"), index)

        assert [doc.document_id for doc in results] == [0]

    def test_idf_of_unknown_term_is_none(self):
        index = build_index(["cat"])

        assert RelevanceEngine().idf("dog", index) is None


class TestMinusTerms:
    """Test exclusion rules"""

    def test_minus_term_vetoes_regardless_of_score(self):
        """Documents containing a minus term never appear"""
        index = build_index(["cat dog", "cat", "dog bird", "bird bird bird"])

        results = find_top_documents(query_of("cat bird -dog"), index)
        ids = {doc.document_id for doc in results}

        assert ids == {1, 3}
        for document_id in index.postings_for("dog"):
            assert document_id not in ids

    def test_minus_only_query_returns_nothing(self):
        index = build_index(["cat", "dog"])

        assert find_top_documents(query_of("-cat"), index) == []

    def test_unknown_minus_term_excludes_nothing(self):
        index = build_index(["cat x", "dog"])

        results = find_top_documents(query_of("cat -bird"), index)

        assert [doc.document_id for doc in results] == [0]

    def test_term_in_both_sets_is_skipped_without_veto(self):
        """'a -a' drops 'a' from scoring but does not exclude documents with 'a'"""
        index = build_index(["a b", "b c", "c"])

        results = find_top_documents(query_of("a -a b"), index)

        assert [doc.document_id for doc in results] == [0, 1]
        assert results[0].relevance == pytest.approx(0.5 * math.log(1.5))
        assert results[1].relevance == pytest.approx(0.5 * math.log(1.5))

    def test_term_in_both_sets_alone_returns_nothing(self):
        index = build_index(["a", "b"])

        assert find_top_documents(query_of("a -a"), index) == []


class TestRanking:
    """Test ordering, tie-break and truncation"""

    def test_ties_broken_by_ascending_id(self):
        index = build_index(["y x", "x y", "z"])

        results = find_top_documents(query_of("x"), index)

        assert [doc.document_id for doc in results] == [0, 1]
        assert results[0].relevance == results[1].relevance

    def test_default_top_k_is_five(self):
        index = build_index([f"w d{i}" for i in range(7)] + ["other"])

        results = find_top_documents(query_of("w"), index)

        assert [doc.document_id for doc in results] == [0, 1, 2, 3, 4]

    def test_custom_top_k(self):
        index = build_index([f"w d{i}" for i in range(7)] + ["other"])

        assert len(RelevanceEngine(top_k=2).find_top_documents(query_of("w"), index)) == 2
        assert len(RelevanceEngine().find_top_documents(query_of("w"), index, top_k=10)) == 7

    def test_invalid_top_k(self):
        index = build_index(["cat"])

        with pytest.raises(ValueError):
            RelevanceEngine(top_k=0)
        with pytest.raises(ValueError):
            RelevanceEngine().find_top_documents(query_of("cat"), index, top_k=-1)

    def test_results_non_increasing(self):
        index = build_index([
            "alpha beta gamma",
            "alpha alpha delta",
            "beta epsilon",
            "gamma gamma gamma alpha",
            "zeta",
            "beta beta alpha delta epsilon",
        ])

        results = RelevanceEngine(top_k=10).find_top_documents(
            query_of("alpha beta gamma delta epsilon"), index
        )
        relevances = [doc.relevance for doc in results]

        assert len(results) == 5
        assert relevances == sorted(relevances, reverse=True)

    def test_fewer_matches_than_top_k(self):
        index = build_index(["cat", "dog", "bird"])

        assert len(find_top_documents(query_of("cat dog"), index)) == 2


class TestEdgeCases:
    """Empty corpus, empty queries, determinism"""

    def test_empty_corpus(self):
        index = InvertedIndex()

        assert find_top_documents(query_of("cat -dog"), index) == []

    def test_corpus_of_empty_documents(self):
        index = InvertedIndex()
        index.add_document(0, [])

        assert find_top_documents(query_of("cat"), index) == []

    def test_empty_query(self):
        index = build_index(["cat"])

        assert find_top_documents(Query(), index) == []

    def test_empty_query_skips_scoring(self, monkeypatch):
        """No plus or minus terms: nothing is scored at all"""
        index = build_index(["cat"])
        engine = RelevanceEngine()

        def fail(*args):
            raise AssertionError("score_documents called for an empty query")

        monkeypatch.setattr(engine, "score_documents", fail)

        assert engine.find_top_documents(Query(), index) == []

    def test_idempotent_across_builds(self):
        documents = ["a b c", "a c d", "b d d", "c a a", "d"]

        first = find_top_documents(query_of("a d -b"), build_index(documents))
        second = find_top_documents(query_of("a d -b"), build_index(documents))

        assert first == second

    def test_scoring_does_not_mutate_index(self):
        index = build_index(["a b", "b"])
        before = {term: dict(index.postings_for(term)) for term in index.terms()}

        find_top_documents(query_of("a -b"), index)

        assert {term: dict(index.postings_for(term)) for term in index.terms()} == before
        assert index.document_count == 2


class TestDocstringExamples:
    """Examples in scorer docstrings stay runnable"""

    def test_scorer_examples(self):
        results = doctest.testmod(scorer)

        assert results.attempted > 0
        assert results.failed == 0
