
"""
Wide feature tables (one row per document, one column per term) and class balancing.
"""

##################
### Imports
##################

## External Libraries
import numpy as np
import pandas as pd
from scipy.sparse import csr_matrix
from sklearn.feature_extraction import DictVectorizer

## Local Modules
from ..util.logging import initialize_logger

##################
### Globals
##################

## Logging
LOGGER = initialize_logger()

## Weights That Can Fill the Table
VALUE_COLUMNS = set(["raw_count","tf_idf"])

##################
### Functions
##################

def _initialize_dict_vectorizer(terms):
    """
    Initialize a vectorizer that transforms a term->weight dictionary
    into a sparse vector (with a uniform feature index)

    Args:
        terms (list of str): Ordered column names

    Returns:
        count2vec (DictVectorizer): Vectorizer with a fixed vocabulary
    """
    count2vec = DictVectorizer(separator=":", dtype=float)
    count2vec.vocabulary_ = dict(zip(terms, range(len(terms))))
    count2vec.feature_names_ = list(terms)
    return count2vec

def build_feature_table(weighted,
                        labels,
                        value="tf_idf",
                        vocabulary=None,
                        label_col="is_prez"):
    """
    Reshape the long (document, term, weight) relation into a wide table.

    Args:
        weighted (pandas DataFrame): Output of compute_tfidf
        labels (dict or pandas Series): document_id -> label
        value (str): Which weight fills the table ("raw_count" or "tf_idf")
        vocabulary (Vocabulary, list, or None): Column order. If None, the sorted
                                                distinct terms in weighted are used.
        label_col (str): Name of the label column in the output

    Returns:
        table (pandas DataFrame): Indexed by document_id. One column per term
                                  (absent terms filled with 0) plus the label column.
    """
    ## Check Inputs
    if value not in VALUE_COLUMNS:
        raise ValueError("value must be one of {}. Found {}".format(sorted(VALUE_COLUMNS), value))
    if vocabulary is None:
        terms = sorted(weighted["term"].unique())
    elif hasattr(vocabulary, "get_ordered_vocabulary"):
        terms = vocabulary.get_ordered_vocabulary()
    else:
        terms = list(vocabulary)
    if label_col in terms:
        raise ValueError("Label column `{}` collides with a vocabulary term".format(label_col))
    ## Sparse Document Maps
    document_ids = list(pd.unique(weighted["document_id"]))
    doc_maps = dict((doc_id, {}) for doc_id in document_ids)
    for doc_id, term, weight in zip(weighted["document_id"], weighted["term"], weighted[value]):
        doc_maps[doc_id][term] = weight
    ## Materialize
    count2vec = _initialize_dict_vectorizer(terms)
    X = count2vec.transform([doc_maps[doc_id] for doc_id in document_ids])
    if isinstance(X, csr_matrix):
        X = X.toarray()
    table = pd.DataFrame(X, index=pd.Index(document_ids, name="document_id"), columns=terms)
    if value == "raw_count":
        table = table.astype(int)
    ## Join Labels
    labels = pd.Series(labels)
    missing = set(document_ids) - set(labels.index)
    if missing:
        raise ValueError("Found {} documents without a label".format(len(missing)))
    table[label_col] = labels.reindex(document_ids).values
    return table

def balance_classes(table,
                    label_col="is_prez",
                    random_state=42):
    """
    Down-sample every class to the size of the smallest class.

    Args:
        table (pandas DataFrame): Feature table with a label column
        label_col (str): Label column
        random_state (int): Seed for the sample

    Returns:
        balanced (pandas DataFrame): Rows kept, in their original order
        class_counts (dict): Number of rows per class before balancing
    """
    class_counts = table[label_col].value_counts().sort_index().to_dict()
    if len(class_counts) < 2:
        raise ValueError("Class balancing requires at least two classes. Found {}".format(class_counts))
    LOGGER.info("Class Counts Before Balancing: {}".format(class_counts))
    m = min(class_counts.values())
    seed = np.random.RandomState(random_state)
    keep = set()
    for label in sorted(class_counts):
        label_index = np.nonzero((table[label_col] == label).values)[0]
        keep.update(seed.choice(label_index, size=m, replace=False))
    balanced = table.iloc[sorted(keep)]
    return balanced, class_counts
