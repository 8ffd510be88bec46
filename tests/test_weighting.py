
## Standard Library
import math

## External Libraries
import pytest
import numpy as np
import pandas as pd

## Local
from preztweet.model.vocab import Vocabulary
from preztweet.model.aggregate import count_document_terms
from preztweet.model.weighting import compute_tfidf, idf_by_term, WEIGHT_COLUMNS

def _weights(document_ids, token_lists, vocabulary=None):
    vocab = vocabulary if vocabulary is not None else Vocabulary(max_vocab_size=None).fit(token_lists)
    counts, totals, _ = count_document_terms(document_ids, token_lists, vocab)
    return compute_tfidf(counts, totals, vocabulary=vocab)

def test_compute_tfidf_toy_corpus(toy_corpus, toy_tokens):
    weighted = _weights(toy_corpus["tweet_id"], toy_tokens)
    assert list(weighted.columns) == WEIGHT_COLUMNS
    run4 = weighted.loc[(weighted["document_id"] == "doc4") & (weighted["term"] == "run")].iloc[0]
    assert run4["raw_count"] == 3
    assert run4["total"] == 3
    assert run4["tf"] == 1.0
    assert run4["docs_with_word"] == 2
    assert run4["idf"] == pytest.approx(math.log(2))
    assert run4["tf_idf"] == pytest.approx(0.693, abs=1e-3)
    the = weighted.loc[weighted["term"] == "the"]
    assert set(the["document_id"]) == {"doc1","doc2"}
    assert (the["docs_with_word"] == 2).all()
    assert the["idf"].iloc[0] == pytest.approx(math.log(2))

def test_tf_sums_to_one_and_matches_closed_form():
    ids = ["a","b","c","d"]
    tokens = [["x","x","y"],["x","z"],["y","y","y","z"],["w"]]
    weighted = _weights(ids, tokens)
    tf_sums = weighted.groupby("document_id")["tf"].sum()
    assert np.allclose(tf_sums.values, 1.0)
    assert (weighted["tf"] == weighted["raw_count"] / weighted["total"]).all()
    assert (weighted["idf"] == np.log(4 / weighted["docs_with_word"])).all()
    assert (weighted["tf_idf"] == weighted["tf"] * weighted["idf"]).all()
    doc_freq = weighted.groupby("term")["document_id"].nunique()
    assert (weighted["term"].map(doc_freq) == weighted["docs_with_word"]).all()
    assert weighted["docs_with_word"].between(1, 4).all()

def test_idf_zero_iff_term_in_every_document():
    weighted = _weights(["a","b","c"], [["x","y"],["x","z"],["x"]])
    idf = idf_by_term(weighted).set_index("term")["idf"]
    assert idf["x"] == 0.0
    assert idf["y"] > 0 and idf["z"] > 0
    assert idf["y"] == pytest.approx(math.log(3))

def test_idf_non_increasing_in_document_frequency():
    tokens = [["a","b","c","d"],["a","b","c"],["a","b"],["a"],["e"]]
    weighted = _weights(list("vwxyz"), tokens)
    idf = idf_by_term(weighted).sort_values("docs_with_word")
    assert idf["idf"].is_monotonic_decreasing
    assert (idf["idf"] >= 0).all()

def test_compute_tfidf_unseen_vocabulary_term_fails():
    counts, totals, _ = count_document_terms(["a","b"], [["x"],["y"]], set(["x","y"]))
    with pytest.raises(ValueError):
        _ = compute_tfidf(counts, totals, vocabulary=set(["x","y","never"]))

def test_compute_tfidf_preconditions():
    counts = pd.DataFrame({"document_id":["a"], "term":["x"], "raw_count":[1]})
    with pytest.raises(ValueError):
        _ = compute_tfidf(counts.iloc[:0], pd.Series(dtype=int))
    with pytest.raises(ValueError):
        _ = compute_tfidf(counts, pd.Series({"a":0}))
    with pytest.raises(ValueError):
        _ = compute_tfidf(counts.assign(raw_count=0), pd.Series({"a":1}))
    with pytest.raises(ValueError):
        _ = compute_tfidf(counts, pd.Series({"b":1}))
