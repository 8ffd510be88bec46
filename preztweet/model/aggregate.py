
"""
Sparse document-term counts restricted to a fixed vocabulary.
"""

##################
### Imports
##################

## Standard Library
from collections import Counter

## External Libraries
import pandas as pd

## Local Modules
from ..util.logging import initialize_logger

##################
### Globals
##################

## Logging
LOGGER = initialize_logger()

## Long-Format Columns
COUNT_COLUMNS = ["document_id","term","raw_count"]

##################
### Functions
##################

def count_document_terms(document_ids,
                         token_lists,
                         vocabulary,
                         labels=None):
    """
    Count vocabulary terms within each document.

    Only (document, term) pairs with a positive count are materialized. Documents
    without any vocabulary term are dropped from the output entirely.

    Args:
        document_ids (list): Unique identifier for each document
        token_lists (list of list of str): Tokens for each document (same order as document_ids)
        vocabulary (Vocabulary or set): Terms to keep
        labels (dict, pandas Series, or None): Optional document_id -> label map used
                                               to report dropped documents by class

    Returns:
        counts (pandas DataFrame): document_id, term, raw_count
        totals (pandas Series): document_id -> total vocabulary tokens (> 0)
        summary (dict): Number of documents seen, retained, and dropped (by label if available)
    """
    ## Check Inputs
    document_ids = list(document_ids)
    token_lists = list(token_lists)
    if len(document_ids) != len(token_lists):
        raise ValueError("Found {} document ids but {} token lists".format(len(document_ids), len(token_lists)))
    if len(set(document_ids)) != len(document_ids):
        raise ValueError("Document ids must be unique")
    vocab = vocabulary.vocab if hasattr(vocabulary, "vocab") else set(vocabulary)
    ## Count
    rows = []
    totals = {}
    dropped = []
    for doc_id, tokens in zip(document_ids, token_lists):
        doc_counts = Counter(t for t in tokens if t in vocab)
        total = sum(doc_counts.values())
        if total == 0:
            dropped.append(doc_id)
            continue
        totals[doc_id] = total
        for term, count in sorted(doc_counts.items()):
            rows.append((doc_id, term, count))
    counts = pd.DataFrame(rows, columns=COUNT_COLUMNS)
    counts["raw_count"] = counts["raw_count"].astype(int)
    totals = pd.Series(totals, name="total", dtype=int)
    totals.index.name = "document_id"
    ## Summarize Dropped Documents
    summary = {
        "n_documents":len(document_ids),
        "n_retained":len(totals),
        "n_dropped":len(dropped),
        "dropped_by_label":None,
    }
    if labels is not None:
        labels = pd.Series(labels)
        summary["dropped_by_label"] = dict(Counter(labels.reindex(dropped).tolist()))
    LOGGER.info("Dropped {}/{} Documents Without Vocabulary Terms{}".format(
                summary["n_dropped"],
                summary["n_documents"],
                "" if summary["dropped_by_label"] is None else " (By Label: {})".format(summary["dropped_by_label"])))
    return counts, totals, summary
