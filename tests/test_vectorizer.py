
## Standard Library
import math

## External Libraries
import pytest
import pandas as pd

## Local
from preztweet.model.vectorizer import Tweet2Vec
from preztweet.model.feature_table import balance_classes

def test_fit_transform_toy_corpus(toy_corpus):
    vectorizer = Tweet2Vec(vocab_kwargs={"max_vocab_size":200})
    weighted = vectorizer.fit_transform(toy_corpus)
    assert vectorizer.vocab.vocab == {"the","cat","sat","dog","run"}
    run4 = weighted.set_index(["document_id","term"]).loc[("doc4","run")]
    assert run4["raw_count"] == 3
    assert run4["tf"] == 1.0
    assert run4["docs_with_word"] == 2
    assert run4["tf_idf"] == pytest.approx(math.log(2))
    assert vectorizer.summary_["n_dropped"] == 0
    idf = vectorizer.get_idf()
    assert set(idf["term"]) == vectorizer.vocab.vocab
    assert idf["idf"].tolist() == pytest.approx([math.log(2)] * 5)

def test_fit_transform_drops_empty_documents(toy_corpus):
    corpus = pd.concat([toy_corpus,
                        pd.DataFrame({"tweet_id":["doc5"],
                                      "text":["https://t.co/AbC123"],
                                      "is_prez":[True]})],
                       ignore_index=True)
    vectorizer = Tweet2Vec()
    weighted = vectorizer.fit_transform(corpus)
    assert "doc5" not in set(weighted["document_id"])
    assert vectorizer.tokens_["doc5"] == []
    assert vectorizer.summary_["n_dropped"] == 1
    assert vectorizer.summary_["dropped_by_label"] == {True:1}
    table = vectorizer.feature_table("raw_count")
    assert "doc5" not in table.index
    assert table.shape == (4, 6)
    balanced, class_counts = balance_classes(table, random_state=0)
    assert class_counts == {False:2, True:2}
    assert len(balanced) == 4

def test_feature_table_requires_fit():
    with pytest.raises(ValueError):
        _ = Tweet2Vec().feature_table()

def test_fit_transform_missing_column(toy_corpus):
    with pytest.raises(ValueError):
        _ = Tweet2Vec().fit_transform(toy_corpus.drop("text", axis=1))
