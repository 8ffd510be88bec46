
"""
Classifiers available to PresidencyClassifier
"""

#####################
### Imports
#####################

## External Libraries
from sklearn.tree import DecisionTreeClassifier

#####################
### Model Classes
#####################

MODEL_DICT = {
    "decision_tree":DecisionTreeClassifier,
}

#####################
### Default Parameters
#####################

## Minimum Split/Leaf Sizes Follow the Usual CART (rpart) Defaults
DEFAULT_PARAMETERS = {
    "decision_tree":{
        "criterion":"gini",
        "max_depth":30,
        "min_samples_split":20,
        "min_samples_leaf":7,
        "random_state":42,
    },
}
