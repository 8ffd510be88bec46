
## External Libraries
import pytest
import pandas as pd

## Local
from preztweet.model.evaluate import stratified_split, confusion_matrix, accuracy

def test_confusion_matrix_and_accuracy():
    matrix = confusion_matrix([True, True, False, False], [True, False, False, False])
    assert matrix.loc[True, True] == 1
    assert matrix.loc[True, False] == 1
    assert matrix.loc[False, True] == 0
    assert matrix.loc[False, False] == 2
    assert accuracy(matrix) == 0.75

def test_confusion_matrix_explicit_labels():
    matrix = confusion_matrix([False, False], [False, False], labels=[False, True])
    assert matrix.shape == (2, 2)
    assert accuracy(matrix) == 1.0

def test_accuracy_empty():
    with pytest.raises(ValueError):
        _ = accuracy([[0, 0], [0, 0]])

@pytest.mark.parametrize("seed", [0, 1, 42])
@pytest.mark.parametrize("fraction", [0.1, 0.5, 0.7, 0.95])
def test_stratified_split_is_partition(seed, fraction):
    labels = pd.Series([True]*10 + [False]*6, index=[f"d{i}" for i in range(16)])
    train_ids, test_ids = stratified_split(labels, train_fraction=fraction, random_state=seed)
    assert set(train_ids) & set(test_ids) == set()
    assert set(train_ids) | set(test_ids) == set(labels.index)

def test_stratified_split_class_sizes_and_reproducibility():
    labels = pd.Series([True]*10 + [False]*6, index=[f"d{i}" for i in range(16)])
    train_ids, test_ids = stratified_split(labels, train_fraction=0.7, random_state=3)
    assert labels[train_ids].sum() == 7
    assert (~labels[train_ids]).sum() == 4
    again, _ = stratified_split(labels, train_fraction=0.7, random_state=3)
    assert again == train_ids

def test_stratified_split_invalid_fraction():
    with pytest.raises(ValueError):
        _ = stratified_split({"a":True}, train_fraction=1.0)
