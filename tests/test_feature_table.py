
## Standard Library
import math

## External Libraries
import pytest
import pandas as pd

## Local
from preztweet.model.vocab import Vocabulary
from preztweet.model.aggregate import count_document_terms
from preztweet.model.weighting import compute_tfidf
from preztweet.model.feature_table import build_feature_table, balance_classes

@pytest.fixture
def toy_weighted(toy_corpus, toy_tokens):
    vocab = Vocabulary(max_vocab_size=200).fit(toy_tokens)
    counts, totals, _ = count_document_terms(toy_corpus["tweet_id"], toy_tokens, vocab)
    weighted = compute_tfidf(counts, totals, vocabulary=vocab)
    labels = dict(zip(toy_corpus["tweet_id"], toy_corpus["is_prez"]))
    return weighted, labels, vocab

def test_build_feature_table_tfidf(toy_weighted):
    weighted, labels, vocab = toy_weighted
    table = build_feature_table(weighted, labels, value="tf_idf", vocabulary=vocab)
    assert table.shape == (4, 6)
    assert list(table.columns) == ["cat","dog","run","sat","the","is_prez"]
    assert table.index.tolist() == ["doc1","doc2","doc3","doc4"]
    assert table.loc["doc4","run"] == pytest.approx(math.log(2))
    assert table.loc["doc4","cat"] == 0.0
    assert table.loc["doc3","run"] == pytest.approx(math.log(2) / 3)
    assert table["is_prez"].tolist() == [True, True, False, False]
    assert not table.isnull().any().any()

def test_build_feature_table_counts(toy_weighted):
    weighted, labels, vocab = toy_weighted
    table = build_feature_table(weighted, labels, value="raw_count", vocabulary=vocab)
    assert table.loc["doc4","run"] == 3
    assert table.loc["doc1"].drop("is_prez").sum() == 3
    assert table.loc["doc1","run"] == 0

def test_build_feature_table_default_columns(toy_weighted):
    weighted, labels, _ = toy_weighted
    table = build_feature_table(weighted, labels)
    assert list(table.columns) == ["cat","dog","run","sat","the","is_prez"]

def test_build_feature_table_invalid(toy_weighted):
    weighted, labels, vocab = toy_weighted
    with pytest.raises(ValueError):
        _ = build_feature_table(weighted, labels, value="tf")
    with pytest.raises(ValueError):
        _ = build_feature_table(weighted, {"doc1":True}, vocabulary=vocab)
    with pytest.raises(ValueError):
        _ = build_feature_table(weighted, labels, vocabulary=vocab, label_col="run")

@pytest.fixture
def imbalanced_table():
    table = pd.DataFrame({"x":range(8), "is_prez":[True]*5 + [False]*3},
                         index=pd.Index([f"d{i}" for i in range(8)], name="document_id"))
    return table

def test_balance_classes(imbalanced_table):
    balanced, class_counts = balance_classes(imbalanced_table, random_state=1)
    assert class_counts == {False:3, True:5}
    assert len(balanced) == 6
    assert balanced["is_prez"].value_counts().to_dict() == {True:3, False:3}
    assert set(balanced.index) <= set(imbalanced_table.index)
    assert set(imbalanced_table.index[imbalanced_table["is_prez"] == False]) <= set(balanced.index)

def test_balance_classes_reproducible(imbalanced_table):
    first, _ = balance_classes(imbalanced_table, random_state=7)
    second, _ = balance_classes(imbalanced_table, random_state=7)
    assert first.index.tolist() == second.index.tolist()

def test_balance_classes_single_class(imbalanced_table):
    with pytest.raises(ValueError):
        _ = balance_classes(imbalanced_table.loc[imbalanced_table["is_prez"]])
