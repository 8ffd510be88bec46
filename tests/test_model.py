
## External Libraries
import pytest
import numpy as np
import pandas as pd

## Local
from preztweet.model.model import PresidencyClassifier
from preztweet.model.evaluate import evaluate_splits

@pytest.fixture
def separable_table():
    seed = np.random.RandomState(0)
    y = np.array([True]*20 + [False]*20)
    table = pd.DataFrame({"wall":y.astype(float),
                          "noise":seed.uniform(size=40),
                          "is_prez":y},
                         index=pd.Index([f"d{i}" for i in range(40)], name="document_id"))
    return table

def test_fit_predict(separable_table):
    model = PresidencyClassifier().fit(separable_table)
    y_pred = model.predict(separable_table)
    assert isinstance(y_pred, pd.Series)
    assert y_pred.index.tolist() == separable_table.index.tolist()
    assert y_pred.dtype == bool
    assert (y_pred == separable_table["is_prez"]).all()
    assert model.get_feature_names() == ["wall","noise"]
    assert "wall" in model.describe()

def test_predict_ignores_column_order(separable_table):
    model = PresidencyClassifier().fit(separable_table)
    shuffled = separable_table[["is_prez","noise","wall"]]
    assert (model.predict(shuffled) == separable_table["is_prez"]).all()

def test_evaluate_splits(separable_table):
    train = separable_table.iloc[::2]
    test = separable_table.iloc[1::2]
    model = PresidencyClassifier(model_kwargs={"min_samples_split":2, "min_samples_leaf":1}).fit(train)
    scores = evaluate_splits(model, train, test)
    assert scores["train"]["accuracy"] == 1.0
    assert scores["test"]["accuracy"] == 1.0
    assert scores["test"]["support"] == 20
    assert scores["test"]["confusion_matrix"].values.sum() == 20

def test_dump_and_load(separable_table, tmp_path):
    model = PresidencyClassifier().fit(separable_table)
    filename = model.dump(str(tmp_path / "model"))
    assert filename.endswith(".joblib")
    loaded = PresidencyClassifier.load(filename)
    assert (loaded.predict(separable_table) == model.predict(separable_table)).all()

def test_invalid_usage(separable_table):
    with pytest.raises(KeyError):
        _ = PresidencyClassifier(model="svm")
    with pytest.raises(ValueError):
        _ = PresidencyClassifier().fit(separable_table.drop("is_prez", axis=1))
    with pytest.raises(ValueError):
        _ = PresidencyClassifier().fit(separable_table.iloc[:0])

def test_copy(separable_table):
    model = PresidencyClassifier().fit(separable_table)
    model_copy = model.copy()
    assert model_copy is not model
    assert model_copy.model is not model.model
    assert (model_copy.predict(separable_table) == model.predict(separable_table)).all()
    assert model_copy.get_feature_names() == model.get_feature_names()
