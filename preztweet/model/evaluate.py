
"""
Train/test splitting and confusion-matrix scoring
"""

####################
### Imports
####################

## External Libraries
import numpy as np
import pandas as pd
from sklearn import metrics

## Local Modules
from ..util.logging import initialize_logger

####################
### Globals
####################

## Logging
LOGGER = initialize_logger()

####################
### Functions
####################

def stratified_split(labels,
                     train_fraction=0.7,
                     random_state=42):
    """
    Partition documents into training and test sets, sampling the same
    fraction from each label class.

    Args:
        labels (dict or pandas Series): document_id -> label
        train_fraction (float): Fraction of each class used for training
        random_state (int): Seed for the sample

    Returns:
        train_ids (list): Training document ids (input order)
        test_ids (list): Every other document id (input order)
    """
    if not 0 < train_fraction < 1:
        raise ValueError("train_fraction must be in the open interval (0, 1)")
    labels = pd.Series(labels)
    if not labels.index.is_unique:
        raise ValueError("Document ids must be unique")
    seed = np.random.RandomState(random_state)
    train = set()
    for label in sorted(labels.unique()):
        label_ids = labels.index[(labels == label).values]
        n_train = int(round(train_fraction * len(label_ids)))
        train_ind = seed.choice(len(label_ids), size=n_train, replace=False)
        train.update(label_ids[i] for i in train_ind)
    ## Test Set is the Complement
    train_ids = [i for i in labels.index if i in train]
    test_ids = [i for i in labels.index if i not in train]
    return train_ids, test_ids

def confusion_matrix(y_true,
                     y_pred,
                     labels=None):
    """
    Confusion matrix with true classes as rows and predicted classes as columns.

    Args:
        y_true (array-like): Ground truth labels
        y_pred (array-like): Predicted labels
        labels (list or None): Class order. Defaults to the sorted union of observed labels.

    Returns:
        matrix (pandas DataFrame): Counts indexed by true label, columns by predicted label
    """
    y_true = list(y_true)
    y_pred = list(y_pred)
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred have different lengths")
    if labels is None:
        labels = sorted(set(y_true) | set(y_pred))
    matrix = metrics.confusion_matrix(y_true, y_pred, labels=labels)
    matrix = pd.DataFrame(matrix,
                          index=pd.Index(labels, name="true"),
                          columns=pd.Index(labels, name="predicted"))
    return matrix

def accuracy(matrix):
    """
    Fraction of correct predictions in a confusion matrix.

    Args:
        matrix (pandas DataFrame or 2d-array): Square confusion matrix

    Returns:
        acc (float): trace / sum
    """
    matrix = np.asarray(matrix)
    total = matrix.sum()
    if total == 0:
        raise ValueError("Cannot compute accuracy of an empty confusion matrix")
    return float(np.trace(matrix) / total)

def evaluate_splits(model,
                    train_table,
                    test_table,
                    label_col="is_prez"):
    """
    Score a fitted classifier on its training and test tables.

    Args:
        model (PresidencyClassifier): Fitted classifier
        train_table (pandas DataFrame): Training feature table
        test_table (pandas DataFrame): Test feature table
        label_col (str): Label column

    Returns:
        scores (dict): For "train" and "test": confusion_matrix, accuracy, support
    """
    scores = {}
    for split, table in [("train", train_table), ("test", test_table)]:
        y_true = table[label_col].astype(bool)
        y_pred = model.predict(table)
        matrix = confusion_matrix(y_true, y_pred, labels=[False, True])
        scores[split] = {
            "confusion_matrix":matrix,
            "accuracy":accuracy(matrix),
            "support":len(table),
        }
        LOGGER.info("{} Accuracy: {:.4f} ({} Documents)".format(split.title(), scores[split]["accuracy"], len(table)))
    return scores
