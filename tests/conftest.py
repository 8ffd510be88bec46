
## External Libraries
import pytest
import pandas as pd

@pytest.fixture
def toy_corpus():
    """
    Four documents, two per class
    """
    corpus = pd.DataFrame({
        "tweet_id":["doc1","doc2","doc3","doc4"],
        "text":["the cat sat","the dog sat","cat dog run","run run run"],
        "is_prez":[True, True, False, False],
    })
    return corpus

@pytest.fixture
def toy_tokens(toy_corpus):
    """
    Whitespace tokens of the toy corpus
    """
    return [t.split() for t in toy_corpus["text"]]
