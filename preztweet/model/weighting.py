
"""
Term frequency / inverse document frequency weighting of long-format counts.
"""

##################
### Imports
##################

## External Libraries
import numpy as np
import pandas as pd

## Local Modules
from ..util.logging import initialize_logger

##################
### Globals
##################

## Logging
LOGGER = initialize_logger()

## Weighted Relation Columns
WEIGHT_COLUMNS = ["document_id",
                  "term",
                  "raw_count",
                  "total",
                  "tf",
                  "docs_with_word",
                  "idf",
                  "tf_idf"]

##################
### Functions
##################

def _check_inputs(counts,
                  totals):
    """
    Validate aggregated counts before weighting. Failures indicate the
    pipeline was wired incorrectly, not a data quality issue.

    Args:
        counts (pandas DataFrame): document_id, term, raw_count
        totals (pandas Series): document_id -> total

    Returns:
        None
    """
    missing = set(["document_id","term","raw_count"]) - set(counts.columns)
    if missing:
        raise ValueError("Counts are missing columns: {}".format(sorted(missing)))
    if len(counts) == 0 or len(totals) == 0:
        raise ValueError("Cannot weight an empty document-term relation")
    if (counts["raw_count"] <= 0).any():
        raise ValueError("Counts must be strictly positive")
    if (totals <= 0).any():
        raise ValueError("Document totals must be strictly positive")
    if counts.duplicated(subset=["document_id","term"]).any():
        raise ValueError("Found duplicate (document_id, term) pairs")
    unknown = set(counts["document_id"]) - set(totals.index)
    if unknown:
        raise ValueError("Found {} documents in counts without a total".format(len(unknown)))

def compute_tfidf(counts,
                  totals,
                  vocabulary=None):
    """
    Compute tf, document frequency, idf, and tf-idf for every (document, term) pair.

    idf = ln(N / docs_with_word), where N is the number of documents in totals.
    tf = raw_count / total. No smoothing is applied.

    Args:
        counts (pandas DataFrame): document_id, term, raw_count (positive counts only)
        totals (pandas Series): document_id -> total vocabulary count for the document
        vocabulary (Vocabulary, iterable, or None): If given, every term must appear in
                                                    at least one document.

    Returns:
        weighted (pandas DataFrame): Columns in WEIGHT_COLUMNS
    """
    ## Preconditions
    _check_inputs(counts, totals)
    n_documents = len(totals)
    ## Document Frequency
    docs_with_word = counts.groupby("term")["document_id"].nunique().rename("docs_with_word")
    if vocabulary is not None:
        vocab = vocabulary.vocab if hasattr(vocabulary, "vocab") else set(vocabulary)
        unseen = vocab - set(docs_with_word.index)
        if unseen:
            raise ValueError("{} vocabulary terms do not appear in any document (e.g. {}). Was the vocabulary learned on a different corpus?".format(
                len(unseen), sorted(unseen)[:5]))
    if (docs_with_word < 1).any() or (docs_with_word > n_documents).any():
        raise ValueError("Document frequency must be between 1 and the number of documents")
    ## Join Totals and Document Frequency
    weighted = counts[["document_id","term","raw_count"]].copy()
    weighted["total"] = weighted["document_id"].map(totals).astype(int)
    weighted["tf"] = weighted["raw_count"] / weighted["total"]
    weighted["docs_with_word"] = weighted["term"].map(docs_with_word).astype(int)
    weighted["idf"] = np.log(n_documents / weighted["docs_with_word"])
    weighted["tf_idf"] = weighted["tf"] * weighted["idf"]
    weighted = weighted[WEIGHT_COLUMNS].reset_index(drop=True)
    return weighted

def idf_by_term(weighted):
    """
    Summarize document frequency and idf for each term.

    Args:
        weighted (pandas DataFrame): Output of compute_tfidf

    Returns:
        idf (pandas DataFrame): term, docs_with_word, idf (sorted by idf, then term)
    """
    idf = weighted[["term","docs_with_word","idf"]].drop_duplicates(subset=["term"])
    idf = idf.sort_values(["idf","term"], ascending=[False, True]).reset_index(drop=True)
    return idf
