
"""
Train and evaluate decision trees on count and tf-idf representations of
pre- vs. post-presidency tweets.

Usage:
    python scripts/model/train.py configs/train.json --allow_overwrite
"""

##########################
### Imports
##########################

## Standard Library
import os
import json
import argparse

## Local
from preztweet.model.vectorizer import Tweet2Vec
from preztweet.model.model import PresidencyClassifier
from preztweet.model.feature_table import balance_classes
from preztweet.model.evaluate import stratified_split, evaluate_splits
from preztweet.preprocess.preprocess import load_tweets, label_presidency, sample_corpus
from preztweet.util.config import load_configuration
from preztweet.util.helpers import make_dirs
from preztweet.util.logging import initialize_logger

##########################
### Globals
##########################

## Logging
LOGGER = initialize_logger()

## Label Column
LABEL_COL = "is_prez"

## Weighting Schemes (Name -> Value Column)
SCHEMES = {
    "count":"raw_count",
    "tfidf":"tf_idf",
}

##########################
### Functions
##########################

def parse_command_line():
    """

    """
    parser = argparse.ArgumentParser()
    _ = parser.add_argument("config",
                            type=str,
                            help="Path to experiment configuration file.")
    _ = parser.add_argument("--output_dir",
                            type=str,
                            default=None)
    _ = parser.add_argument("--allow_overwrite",
                            default=False,
                            action="store_true")
    _ = parser.add_argument("--jobs",
                            type=int,
                            default=None)
    args = parser.parse_args()
    return args

def initialize_output_dir(config,
                          allow_overwrite=False):
    """

    """
    output_dir = "{}/{}".format(config["output_dir"], config["experiment_id"]).replace("//","/")
    if os.path.exists(output_dir) and not allow_overwrite:
        raise FileExistsError("If overwriting, must include --allow_overwrite flag.")
    output_dir = make_dirs(output_dir, True)
    with open(f"{output_dir}/config.json","w") as the_file:
        json.dump(config, the_file, indent=4, sort_keys=False)
    return output_dir

def format_scores(scores):
    """
    Make evaluation results JSON serializable
    """
    formatted = {}
    for split, split_scores in scores.items():
        matrix = split_scores["confusion_matrix"]
        formatted[split] = {
            "accuracy":split_scores["accuracy"],
            "support":split_scores["support"],
            "confusion_matrix":{
                "labels":[str(l) for l in matrix.index],
                "counts":matrix.values.tolist(),
            }
        }
    return formatted

def run_scheme(vectorizer,
               scheme,
               config,
               output_dir):
    """
    Build, balance, split, fit, and score one weighting scheme.
    """
    ## Feature Table
    table = vectorizer.feature_table(value=SCHEMES[scheme], label_col=LABEL_COL)
    table, class_counts = balance_classes(table, label_col=LABEL_COL, random_state=config["seed"])
    table.to_csv(f"{output_dir}/features.{scheme}.csv")
    ## Split
    train_ids, test_ids = stratified_split(table[LABEL_COL],
                                           train_fraction=config["train_fraction"],
                                           random_state=config["seed"])
    LOGGER.info("Split Sizes: {} Train, {} Test".format(len(train_ids), len(test_ids)))
    ## Fit
    model = PresidencyClassifier(model=config["model"],
                                 model_kwargs=config["model_kwargs"],
                                 label_col=LABEL_COL,
                                 random_state=config["seed"])
    model = model.fit(table.loc[train_ids])
    _ = model.dump(f"{output_dir}/model.{scheme}.joblib")
    with open(f"{output_dir}/tree.{scheme}.txt","w") as the_file:
        the_file.write(model.describe())
    ## Evaluate
    scores = evaluate_splits(model,
                             table.loc[train_ids],
                             table.loc[test_ids],
                             label_col=LABEL_COL)
    result = {
        "class_counts_before_balance":{str(x):int(y) for x, y in class_counts.items()},
        "n_balanced":len(table),
        "scores":format_scores(scores),
    }
    return result

def main():
    """

    """
    ## Parse Command Line, Load Configuration
    args = parse_command_line()
    config = load_configuration(args.config,
                                overrides={"output_dir":args.output_dir, "jobs":args.jobs})
    if config["data"] is None:
        raise ValueError("Configuration must specify a `data` file.")
    ## Output Directory
    LOGGER.info("[Initializing Output Directory]")
    output_dir = initialize_output_dir(config, args.allow_overwrite)
    ## Load Corpus
    LOGGER.info("[Loading Corpus]")
    tweets = load_tweets(config["data"], keep_retweets=config["keep_retweets"])
    tweets = label_presidency(tweets, start_date=config["presidency_start"], label_col=LABEL_COL)
    tweets = sample_corpus(tweets,
                           n_per_class=config["corpus_sample_per_class"],
                           label_col=LABEL_COL,
                           random_state=config["seed"])
    ## Vectorize
    LOGGER.info("[Generating Weighted Document-Term Relation]")
    vectorizer = Tweet2Vec(tokenizer_kwargs=config["tokenizer"],
                           vocab_kwargs={"max_vocab_size":config["vocab_size"]},
                           jobs=config["jobs"])
    weighted = vectorizer.fit_transform(tweets, id_col="tweet_id", text_col="text", label_col=LABEL_COL)
    ## Cache Intermediate Tables
    LOGGER.info("[Caching Vocabulary and Weights]")
    with open(f"{output_dir}/vocabulary.txt","w") as the_file:
        the_file.write("\n".join(vectorizer.vocab.get_ordered_vocabulary()))
    weighted.to_csv(f"{output_dir}/document_term.csv", index=False)
    vectorizer.get_idf().to_csv(f"{output_dir}/idf.csv", index=False)
    ## Model Each Representation
    results = {"summary":{x:y for x, y in vectorizer.summary_.items() if x != "dropped_by_label"}}
    results["summary"]["dropped_by_label"] = {str(x):int(y) for x, y in (vectorizer.summary_["dropped_by_label"] or {}).items()}
    for scheme in SCHEMES:
        LOGGER.info("[Modeling: {}]".format(scheme))
        results[scheme] = run_scheme(vectorizer, scheme, config, output_dir)
    ## Cache Scores
    with open(f"{output_dir}/scores.json","w") as the_file:
        json.dump(results, the_file, indent=4)
    LOGGER.info("[Script Complete]")

####################
### Execute
####################

if __name__ == "__main__":
    _ = main()
