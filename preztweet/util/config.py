
"""
Experiment configuration (JSON files merged over defaults)
"""

####################
### Imports
####################

## Standard Library
import os
import json
from copy import deepcopy

## Local Modules
from ..preprocess.tokenizer import (DEFAULT_REMOVE_PATTERN,
                                    DEFAULT_SPLIT_PATTERN)

####################
### Globals
####################

## Default Experiment Parameters
DEFAULT_CONFIG = {
    "experiment_id":"presidency",
    "data":None,
    "output_dir":"./data/results/",
    "presidency_start":"2017-01-20",
    "keep_retweets":True,
    "vocab_size":200,
    "corpus_sample_per_class":1000,
    "train_fraction":0.7,
    "seed":42,
    "jobs":1,
    "tokenizer":{
        "remove_pattern":DEFAULT_REMOVE_PATTERN,
        "split_pattern":DEFAULT_SPLIT_PATTERN,
        "exclude":"realdonaldtrump",
        "lowercase":True,
        "stopwords":None,
    },
    "model":"decision_tree",
    "model_kwargs":{},
}

####################
### Functions
####################

def _merge(base,
           update):
    """
    Recursively merge one dictionary into a copy of another.

    Args:
        base (dict): Default values
        update (dict): Values that take precedence

    Returns:
        merged (dict): Combined dictionary
    """
    merged = deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged

def validate_configuration(config):
    """
    Check types and ranges of the named experiment options.

    Args:
        config (dict): Merged configuration

    Returns:
        config (dict): Same configuration if valid
    """
    for key in ["vocab_size","corpus_sample_per_class","seed","jobs"]:
        value = config.get(key)
        if value is None and key == "corpus_sample_per_class":
            continue
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("Configuration parameter `{}` must be an integer. Found {}".format(key, value))
    if config["vocab_size"] < 1:
        raise ValueError("vocab_size must be at least 1")
    if config["corpus_sample_per_class"] is not None and config["corpus_sample_per_class"] < 1:
        raise ValueError("corpus_sample_per_class must be at least 1")
    if config["jobs"] < 1:
        raise ValueError("jobs must be at least 1")
    if not isinstance(config["train_fraction"], (int, float)) or not 0 < config["train_fraction"] < 1:
        raise ValueError("train_fraction must be in the open interval (0, 1)")
    if not isinstance(config.get("tokenizer"), dict):
        raise ValueError("tokenizer configuration must be a dictionary")
    return config

def load_configuration(config_file=None,
                       overrides=None):
    """
    Load an experiment configuration from disk and merge it over the defaults.

    Args:
        config_file (str or None): Path to a JSON configuration file. If None,
                                   only the defaults (and overrides) are used.
        overrides (dict or None): Values applied after the file is loaded, e.g.
                                  from command line flags. None values are ignored.

    Returns:
        config (dict): Validated configuration
    """
    ## Load File
    file_config = {}
    if config_file is not None:
        if not os.path.exists(config_file):
            raise FileNotFoundError("Configuration File not Found: {}".format(config_file))
        with open(config_file, "r") as the_file:
            file_config = json.load(the_file)
    ## Merge
    config = _merge(DEFAULT_CONFIG, file_config)
    if overrides:
        config = _merge(config, {x:y for x, y in overrides.items() if y is not None})
    ## Validate
    config = validate_configuration(config)
    return config
