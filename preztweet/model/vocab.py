
####################
### Imports
####################

## Standard Libary
from collections import Counter

## Local Modules
from ..util.helpers import flatten
from ..util.logging import initialize_logger

####################
### Globals
####################

## Logging
LOGGER = initialize_logger()

####################
### Functions
####################

def select_top_terms(counts,
                     k):
    """
    Select the most frequent terms, keeping every term tied at the cutoff.

    A term's rank is one plus the number of distinct terms with a strictly
    greater count. All terms with rank <= k are kept, so the result may be
    larger than k.

    Args:
        counts (dict or Counter): Term to count mapping
        k (int or None): Target vocabulary size. None keeps every term.

    Returns:
        terms (set): Selected terms
    """
    if k is None:
        return set(counts.keys())
    if k < 1:
        raise ValueError("Vocabulary size must be at least 1")
    if len(counts) <= k:
        return set(counts.keys())
    ## Count of the Term in Position k (Ties Share the Best Rank)
    threshold = sorted(counts.values(), reverse=True)[k - 1]
    terms = set(t for t, c in counts.items() if c >= threshold)
    return terms

####################
### Class Definition
####################

class Vocabulary(object):

    """
    Vocabulary class
    """

    def __init__(self,
                 max_vocab_size=200,
                 min_token_freq=0):
        """
        Vocabulary Learner

        Args:
            max_vocab_size (int or None): Number of top-ranked terms to keep. Terms tied
                                          at the cutoff rank are all kept.
            min_token_freq (int): Minimum frequency of occurence.
        """
        self._max_vocab_size = max_vocab_size
        self._min_token_freq = min_token_freq
        ## Workspace
        self.ngram_to_idx = dict()
        self.vocab = set()
        self._vocab_count = Counter()
        self._class_state = "untrained"

    def __repr__(self):
        """
        Generate a human-readable description of the class.

        Args:
            None

        Returns:
            desc (str): Prettified representation of the class
        """
        desc = "Vocabulary(max_vocab_size={}, min_token_freq={})".format(self._max_vocab_size,
                                                                         self._min_token_freq)
        return desc

    def __len__(self):
        """

        """
        return len(self.vocab)

    def __contains__(self,
                     term):
        """

        """
        return term in self.vocab

    def _check_trained(self):
        """

        """
        if self._class_state != "trained":
            raise ValueError("Vocabulary has not been fit or assigned.")

    def get_ordered_vocabulary(self):
        """
        Get the vocabulary ordered by it's determined index

        Args:
            None

        Returns:
            ordered_vocab (list): Vocabulary terms ordered by it's learned index mapping
        """
        self._check_trained()
        idx_rev = dict((y, x) for x, y in self.ngram_to_idx.items())
        ordered_vocab = list(map(lambda i: idx_rev[i], range(len(self.vocab))))
        return ordered_vocab

    def get_counts(self):
        """
        Corpus frequency of every term seen during fitting.

        Args:
            None

        Returns:
            counts (Counter): Term counts
        """
        return self._vocab_count.copy()

    def _count_tokens(self,
                      token_lists):
        """
        Count tokens present in a list of token lists

        Args:
            token_lists (list of lists): Lists of unigram tokens

        Returns:
            counts (Counter): Token counts
        """
        counts = Counter(flatten(token_lists))
        return counts

    def assign(self,
               terms):
        """
        Assign a vocabulary instead of learning from scratch.

        Args:
            terms (iterable of str): Vocabulary terms

        Returns:
            self: Sets vocabulary attributes in place, returns class
        """
        terms = list(terms)
        if len(terms) == 0:
            raise ValueError("Cannot assign an empty vocabulary")
        self.vocab = set(terms)
        self._vocab_count = Counter(terms)
        self.ngram_to_idx = dict((term, ind) for ind, term in enumerate(sorted(self.vocab)))
        self._class_state = "trained"
        return self

    def fit(self,
            token_lists):
        """
        Learn a vocabulary from tokenized documents.

        Args:
            token_lists (list of list of str): Tokens for each document in the corpus

        Returns:
            self
        """
        ## Count Tokens
        vocab_counter = self._count_tokens(token_lists)
        ## Prune By Frequency
        if self._min_token_freq:
            vocab_counter = Counter(dict((t, c) for t, c in vocab_counter.items() if c >= self._min_token_freq))
        if len(vocab_counter) == 0:
            raise ValueError("No tokens available for learning a vocabulary.")
        ## Select Top Terms (Tie-Inclusive)
        vocab = select_top_terms(vocab_counter, self._max_vocab_size)
        if self._max_vocab_size is not None and len(vocab) > self._max_vocab_size:
            LOGGER.info("Vocabulary size inflated by ties at the cutoff rank: {} requested, {} selected".format(
                        self._max_vocab_size,
                        len(vocab)))
        ## Maintain Counter as a Class Attribute
        self._vocab_count = vocab_counter
        ## Construct Vocabulary Objects
        self.vocab = vocab
        self.ngram_to_idx = dict((term, ind) for ind, term in enumerate(sorted(self.vocab)))
        ## Update Class State
        self._class_state = "trained"
        return self
