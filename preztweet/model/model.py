
##################
### Imports
##################

## Standard Library
from copy import deepcopy

## External Libraries
import joblib
import pandas as pd
from sklearn.tree import export_text

## Local Modules
from .classifiers import MODEL_DICT, DEFAULT_PARAMETERS
from ..util.logging import initialize_logger

##################
### Globals
##################

## Create Logger
LOGGER = initialize_logger()

## Update Model Dict
CLASSIFIERS = {**MODEL_DICT}
CLASSIFIERS_PARAMS = {**DEFAULT_PARAMETERS}

##################
### Modeling Class
##################

class PresidencyClassifier(object):

    """
    Pre/Post-Presidency Tweet Classification
    """

    def __init__(self,
                 model="decision_tree",
                 model_kwargs={},
                 label_col="is_prez",
                 random_state=42):
        """
        Classifier wrapper around a feature table.

        Args:
            model (str): Classifier to use for modeling (key of MODEL_DICT)
            model_kwargs (dict): Arguments to pass to initialization of the classifier.
                                 Falls back to DEFAULT_PARAMETERS if empty.
            label_col (str): Label column in the feature table
            random_state (int): Random state. Default is 42
        """
        if model not in CLASSIFIERS:
            raise KeyError("Classifier `{}` not recognized. Options: {}".format(model, sorted(CLASSIFIERS)))
        ## Class Attributes
        self._model_type = model
        self._label_col = label_col
        self._random_state = random_state
        ## Initialize Classification Model
        self._model_kwargs = dict(model_kwargs) if len(model_kwargs) > 0 else dict(CLASSIFIERS_PARAMS.get(model, {}))
        self._model_kwargs["random_state"] = self._random_state
        self.model = CLASSIFIERS.get(model)(**self._model_kwargs)
        self._feature_names = None

    def __repr__(self):
        """
        Generate a human-readable description of the class.

        Args:
            None

        Returns:
            desc (str): Prettified representation of the class
        """
        ms = ", ".join("{}={}".format(x,y) for x,y in self._model_kwargs.items())
        desc = "PresidencyClassifier(model={}, {})".format(self._model_type, ms)
        return desc

    def _split_table(self,
                     feature_table):
        """
        Separate features and labels

        Args:
            feature_table (pandas DataFrame): Wide feature table

        Returns:
            X (pandas DataFrame): Feature columns
            y (pandas Series or None): Labels if present
        """
        if self._label_col in feature_table.columns:
            y = feature_table[self._label_col].astype(bool)
            X = feature_table.drop(self._label_col, axis=1)
        else:
            y = None
            X = feature_table
        return X, y

    def get_feature_names(self):
        """
        Extract model feature names

        Args:
            None

        Returns:
            features (list): Named list of features used for fitting
        """
        if self._feature_names is None:
            raise ValueError("Model has not been fit.")
        return list(self._feature_names)

    def fit(self,
            feature_table):
        """
        Args:
            feature_table (pandas DataFrame): One row per document, numeric feature
                                              columns, and the label column

        Returns:
            self: Base class with trained classifier.
        """
        X, y = self._split_table(feature_table)
        if y is None:
            raise ValueError("Feature table is missing label column `{}`".format(self._label_col))
        LOGGER.info("Fitting Classifier on {} Documents x {} Features".format(X.shape[0], X.shape[1]))
        self._feature_names = list(X.columns)
        self.model = self.model.fit(X.values, y.values)
        return self

    def predict(self,
                feature_table):
        """
        Make predictions for every row of a feature table.

        Args:
            feature_table (pandas DataFrame): Feature table. The label column is ignored
                                              if present.

        Returns:
            y_pred (pandas Series): Predicted boolean labels, indexed like the input
        """
        X, _ = self._split_table(feature_table)
        if self._feature_names is not None:
            X = X[self._feature_names]
        y_pred = self.model.predict(X.values)
        y_pred = pd.Series(y_pred.astype(bool), index=feature_table.index, name=self._label_col)
        return y_pred

    def describe(self,
                 max_depth=10):
        """
        Text rendering of the fitted tree.

        Args:
            max_depth (int): Deepest level to render

        Returns:
            desc (str): Tree rules
        """
        return export_text(self.model,
                           feature_names=self.get_feature_names(),
                           max_depth=max_depth)

    def copy(self):
        """
        Make a copy of the PresidencyClassifier class.

        Args:
            None

        Returns:
            deepcopy of the PresidencyClassifier
        """
        return deepcopy(self)

    def dump(self,
             filename,
             compress=5):
        """
        Save the model instance to disk using joblib.

        Args:
            filename (str): Name of the model for saving.
            compress (int): Level of compression to pass to
                            joblib dump function.

        Returns:
            filename (str): Path the model was written to
        """
        if not filename.endswith(".joblib"):
            filename = filename + ".joblib"
        _ = joblib.dump(self,
                        filename,
                        compress=compress)
        return filename

    @staticmethod
    def load(filename):
        """
        Load a model saved with dump.

        Args:
            filename (str): Path to a .joblib file

        Returns:
            model (PresidencyClassifier): Loaded model
        """
        model = joblib.load(filename)
        if not isinstance(model, PresidencyClassifier):
            raise ValueError("File does not contain a PresidencyClassifier: {}".format(filename))
        return model
