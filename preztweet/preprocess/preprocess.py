
"""
Loading, labeling, and sampling of raw tweet archives.
"""

#############################
### Imports
#############################

## Standard Library
import os
import json
import gzip
from datetime import datetime, timezone
from dateutil.parser import parse

## External Library
import numpy as np
import pandas as pd

## Local Modules
from ..util.logging import initialize_logger

#############################
### Globals
#############################

## Logging
LOGGER = initialize_logger()

## Date of the First Inauguration
PRESIDENCY_START = "2017-01-20"

## Raw Field -> Processed Field
GENERAL_SCHEMA = {
    "tweet":{
            "id_str":"tweet_id",
            "id":"tweet_id",
            "text":"text",
            "full_text":"text",
            "created_at":"created_at",
            "created_utc":"created_utc",
            "favorite_count":"favorite_count",
            "retweet_count":"retweet_count",
            "is_retweet":"is_retweet",
            "source":"source",
    }
}

#############################
### Functions
#############################

def _to_epoch(value):
    """
    Convert a raw timestamp into epoch seconds (UTC)

    Args:
        value (str, int, float, or datetime): Timestamp

    Returns:
        epoch (int or None): Seconds since 1970-01-01 UTC
    """
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        return int(value)
    if not isinstance(value, datetime):
        value = parse(str(value))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())

def _read_file(filename):
    """
    Read a raw archive into a list of records or a DataFrame

    Args:
        filename (str): Path to .json, .json.gz, or .csv file

    Returns:
        data (pandas DataFrame): Raw records
    """
    if filename.endswith(".csv"):
        return pd.read_csv(filename, dtype={"id_str":str, "id":str})
    if filename.endswith(".gz"):
        file_opener = gzip.open
    else:
        file_opener = open
    with file_opener(filename, "rt") as the_file:
        try:
            data = json.load(the_file)
        except json.JSONDecodeError:
            ## Newline Delimited
            the_file.seek(0)
            data = [json.loads(line) for line in the_file if line.strip()]
    if isinstance(data, dict):
        data = [data]
    data = pd.DataFrame(data)
    return data

def _rename_keys(data):
    """
    Map raw field names onto the processed schema, preferring the first
    matching source field for each target.

    Args:
        data (pandas DataFrame): Raw records

    Returns:
        data (pandas DataFrame): Renamed records
    """
    seen = set()
    rename = {}
    for source, target in GENERAL_SCHEMA["tweet"].items():
        if source not in data.columns or target in seen:
            continue
        if target in data.columns and target != source:
            seen.add(target)
            continue
        rename[source] = target
        seen.add(target)
    drop = [c for c in GENERAL_SCHEMA["tweet"] if c in data.columns and c not in rename]
    data = data.drop(drop, axis=1).rename(columns=rename)
    return data

def _is_retweet(row):
    """

    """
    flag = row.get("is_retweet")
    if isinstance(flag, str):
        flag = flag.strip().lower() == "true"
    if flag is True or flag == 1:
        return True
    text = row.get("text")
    return isinstance(text, str) and text.startswith("RT")

def load_tweets(filename,
                keep_retweets=True):
    """
    Load a tweet archive into a DataFrame with one row per tweet.

    Args:
        filename (str): Path to a .json, .json.gz, or .csv archive. JSON files may
                        hold a list of tweets or one tweet per line.
        keep_retweets (bool): If False, drop retweets

    Returns:
        tweets (pandas DataFrame): Columns tweet_id, text, created_utc and any
                                   passthrough fields (favorite_count, retweet_count, source)
    """
    ## Check File
    if not os.path.exists(filename):
        raise FileNotFoundError("Tweet archive not found: {}".format(filename))
    ## Load and Rename
    tweets = _rename_keys(_read_file(filename))
    for required in ["tweet_id","text"]:
        if required not in tweets.columns:
            raise ValueError("Tweet archive is missing required field `{}`".format(required))
    tweets["tweet_id"] = tweets["tweet_id"].astype(str)
    ## Timestamps
    if "created_utc" not in tweets.columns:
        if "created_at" not in tweets.columns:
            raise ValueError("Tweet archive is missing a timestamp field (created_at or created_utc)")
        tweets["created_utc"] = tweets["created_at"].map(_to_epoch)
    else:
        tweets["created_utc"] = tweets["created_utc"].map(_to_epoch)
    ## Retweet Filtering
    n_raw = len(tweets)
    if not keep_retweets:
        retweet_mask = tweets.apply(_is_retweet, axis=1) if n_raw > 0 else pd.Series(dtype=bool)
        tweets = tweets.loc[~retweet_mask]
        LOGGER.info("Removed {}/{} Retweets".format(n_raw - len(tweets), n_raw))
    ## Drop Null Text/Time, Duplicate IDs
    tweets = tweets.dropna(subset=["text","created_utc"])
    tweets = tweets.drop_duplicates(subset=["tweet_id"], keep="first")
    tweets = tweets.reset_index(drop=True)
    tweets["created_utc"] = tweets["created_utc"].astype(int)
    LOGGER.info("Loaded {} Tweets from {}".format(len(tweets), filename))
    return tweets

def label_presidency(tweets,
                     start_date=PRESIDENCY_START,
                     label_col="is_prez"):
    """
    Label each tweet by whether it was posted on or after the start of the presidency.

    Args:
        tweets (pandas DataFrame): Output of load_tweets (needs created_utc)
        start_date (str): ISO-format date marking the start of the term
        label_col (str): Name of the boolean label column

    Returns:
        tweets (pandas DataFrame): Copy of the input with the label column added
    """
    if "created_utc" not in tweets.columns:
        raise ValueError("Labeling requires a created_utc column")
    start = _to_epoch(start_date)
    tweets = tweets.copy()
    tweets[label_col] = (tweets["created_utc"] >= start).astype(bool)
    return tweets

def sample_corpus(tweets,
                  n_per_class=1000,
                  label_col="is_prez",
                  random_state=42):
    """
    Sample up to n_per_class documents (without replacement) from each label class.

    Args:
        tweets (pandas DataFrame): Labeled documents
        n_per_class (int or None): Documents per class. None keeps everything.
        label_col (str): Label column
        random_state (int): Seed for the sample

    Returns:
        sample (pandas DataFrame): Sampled documents in their original order
    """
    if n_per_class is None:
        return tweets
    if n_per_class < 1:
        raise ValueError("Cannot specify n_per_class < 1")
    seed = np.random.RandomState(random_state)
    keep = []
    for label in sorted(tweets[label_col].unique()):
        label_index = tweets.index[tweets[label_col] == label].values
        if len(label_index) <= n_per_class:
            keep.extend(label_index)
            LOGGER.info("Class {}={} has {} documents; keeping all".format(label_col, label, len(label_index)))
            continue
        keep.extend(seed.choice(label_index, size=n_per_class, replace=False))
    sample = tweets.loc[tweets.index.isin(keep)]
    return sample
