

##################
### Imports
##################

## External Libraries
import pandas as pd

## Local Modules
from .vocab import Vocabulary
from .aggregate import count_document_terms
from .weighting import compute_tfidf, idf_by_term
from .feature_table import build_feature_table
from ..preprocess.tokenizer import Tokenizer
from ..util.logging import initialize_logger

##################
### Globals
##################

## Logging
LOGGER = initialize_logger()

##################
### Vectorization
##################

class Tweet2Vec(object):

    """
    Tweets to Weighted Document-Term Relation
    """

    def __init__(self,
                 tokenizer_kwargs={},
                 vocab_kwargs={},
                 jobs=1):
        """
        Tweet2Vec tokenizes a corpus, learns a vocabulary, counts vocabulary
        terms per document, and weights them with tf-idf.

        Args:
            tokenizer_kwargs (dict): Arguments to pass to the Tokenizer class
            vocab_kwargs (dict): Arguments to pass to the Vocabulary class
            jobs (int): Number of processes to use for tokenization
        """
        ## Cache kwargs
        self._tokenizer_kwargs = dict(tokenizer_kwargs)
        self._vocab_kwargs = dict(vocab_kwargs)
        self._jobs = jobs
        ## Initialize Components
        self.tokenizer = Tokenizer(**self._tokenizer_kwargs)
        self.vocab = Vocabulary(**self._vocab_kwargs)
        ## Workspace Variables
        self.tokens_ = None
        self.counts_ = None
        self.totals_ = None
        self.weighted_ = None
        self.summary_ = None
        self.labels_ = None

    def __repr__(self):
        """
        Generate a human-readable description of the class.

        Args:
            None

        Returns:
            desc (str): Prettified representation of the class
        """
        desc = f"Tweet2Vec(tokenizer_kwargs={self._tokenizer_kwargs}, vocab_kwargs={self._vocab_kwargs})"
        return desc

    def fit_transform(self,
                      corpus,
                      id_col="tweet_id",
                      text_col="text",
                      label_col="is_prez"):
        """
        Run tokenization, vocabulary selection, aggregation, and weighting.

        Args:
            corpus (pandas DataFrame): Documents with id, text, and (optional) label columns
            id_col (str): Unique document identifier column
            text_col (str): Raw text column
            label_col (str or None): Label column, used for reporting dropped documents

        Returns:
            weighted (pandas DataFrame): Long-format weighted document-term relation
        """
        ## Check Columns
        for col in [id_col, text_col]:
            if col not in corpus.columns:
                raise ValueError("Corpus is missing column `{}`".format(col))
        document_ids = corpus[id_col].tolist()
        if label_col is not None and label_col in corpus.columns:
            self.labels_ = pd.Series(corpus[label_col].values, index=document_ids, name=label_col)
        ## Tokenize
        LOGGER.info("Tokenizing {} Documents".format(len(document_ids)))
        token_lists = self.tokenizer.tokenize_corpus(corpus[text_col].tolist(),
                                                     jobs=self._jobs,
                                                     verbose=len(document_ids) > 1000)
        self.tokens_ = dict(zip(document_ids, token_lists))
        ## Learn Vocabulary
        LOGGER.info("Learning Vocabulary")
        self.vocab = self.vocab.fit(token_lists)
        LOGGER.info("Vocabulary Size: {}".format(len(self.vocab)))
        ## Aggregate
        LOGGER.info("Counting Vocabulary Terms")
        self.counts_, self.totals_, self.summary_ = count_document_terms(document_ids,
                                                                         token_lists,
                                                                         self.vocab,
                                                                         labels=self.labels_)
        self.summary_["vocab_size"] = len(self.vocab)
        self.summary_["vocab_size_requested"] = self.vocab._max_vocab_size
        ## Weight
        LOGGER.info("Computing TF-IDF Weights")
        self.weighted_ = compute_tfidf(self.counts_,
                                       self.totals_,
                                       vocabulary=self.vocab)
        return self.weighted_

    def get_idf(self):
        """
        Per-term document frequency and idf for the fit corpus.

        Args:
            None

        Returns:
            idf (pandas DataFrame): term, docs_with_word, idf
        """
        if self.weighted_ is None:
            raise ValueError("Tweet2Vec has not been fit.")
        return idf_by_term(self.weighted_)

    def feature_table(self,
                      value="tf_idf",
                      labels=None,
                      label_col="is_prez"):
        """
        Build the wide feature table from the fit corpus.

        Args:
            value (str): "raw_count" or "tf_idf"
            labels (dict, pandas Series, or None): document_id -> label. Defaults to
                                                   the labels seen during fitting.
            label_col (str): Name of the label column in the output

        Returns:
            table (pandas DataFrame): Wide feature table indexed by document_id
        """
        if self.weighted_ is None:
            raise ValueError("Tweet2Vec has not been fit.")
        if labels is None:
            labels = self.labels_
        if labels is None:
            raise ValueError("Labels are required to build a feature table.")
        table = build_feature_table(self.weighted_,
                                    labels,
                                    value=value,
                                    vocabulary=self.vocab,
                                    label_col=label_col)
        return table
