
"""
Regular-expression tokenization for tweets.

Example Usage:
```
from preztweet.preprocess.tokenizer import Tokenizer

tokenizer = Tokenizer(exclude="realdonaldtrump")
tokens = tokenizer.tokenize("RT @realDonaldTrump: Make America Great Again! https://t.co/abc123")
## ['make', 'america', 'great', 'again']
```
"""

######################
### Imports
######################

## Standard Library
import re
import sys
from multiprocessing import Pool

## External Libraries
from tqdm import tqdm
from nltk.tokenize import RegexpTokenizer

## Local Modules
from ..util.helpers import flatten, chunks

######################
### Globals
######################

## Substrings Deleted Before Splitting (URLs, Retweet Marker, HTML Escapes)
DEFAULT_REMOVE_PATTERN = r"https?://t\.co/[A-Za-z\d]+|http://[A-Za-z\d]+|&amp;|&lt;|&gt;|\bRT\b|https"

## Token Boundaries (Anything But Word Characters, #, @, and Internal Apostrophes)
DEFAULT_SPLIT_PATTERN = r"(?:[^A-Za-z\d_#@']|'(?![A-Za-z\d_#@]))"

## Flags Shared With nltk's RegexpTokenizer
REGEXP_FLAGS = re.UNICODE | re.MULTILINE | re.DOTALL

######################
### Helpers
######################

def _clean_surrogate_unicode(text):
    """
    Clean strings that have non-processable unicode

    Args:
        text (str): Input text

    Returns:
        cleaned text if a unicode error otherwise arises
    """
    if text is None:
        return text
    try:
        text.encode("utf-8")
        return text
    except UnicodeEncodeError as e:
        if e.reason == "surrogates not allowed":
            return text.encode("utf-8", "ignore").decode("utf-8")
        else:
            raise e

######################
### Tokenizer Class
######################

class Tokenizer(object):

    """
    Tweet Tokenizer
    """

    def __init__(self,
                 remove_pattern=DEFAULT_REMOVE_PATTERN,
                 split_pattern=DEFAULT_SPLIT_PATTERN,
                 exclude=None,
                 lowercase=True,
                 stopwords=None):
        """
        Split tweets into word-like tokens.

        Args:
            remove_pattern (str or None): Regular expression. Every match is deleted from
                                          the raw text before splitting.
            split_pattern (str): Regular expression matching token boundaries.
            exclude (str or None): Tokens containing this substring are dropped
            lowercase (bool): If True (default), lowercase text before splitting
            stopwords (iterable or None): Tokens to drop after splitting
        """
        self.remove_pattern = remove_pattern
        self.split_pattern = split_pattern
        self.exclude = exclude.lower() if exclude is not None else None
        self.lowercase = lowercase
        self.stopwords = set(stopwords) if stopwords is not None else set()
        ## Compile Expressions
        self._initialize_expressions()

    def _initialize_expressions(self):
        """
        Compile the removal and split expressions.
        """
        self._remove_re = re.compile(self.remove_pattern, REGEXP_FLAGS) if self.remove_pattern else None
        self._split_re = re.compile(self.split_pattern, REGEXP_FLAGS)
        self._splitter = RegexpTokenizer(self.split_pattern, gaps=True, discard_empty=True, flags=REGEXP_FLAGS)

    def __getstate__(self):
        """
        Drop compiled expressions before pickling. The nltk tokenizer caches
        a compiled pattern on first use that does not survive pickling.
        """
        state = self.__dict__.copy()
        for attr in ["_remove_re", "_split_re", "_splitter"]:
            _ = state.pop(attr, None)
        return state

    def __setstate__(self, state):
        """
        Restore attributes and recompile expressions.
        """
        self.__dict__.update(state)
        self._initialize_expressions()

    def __repr__(self):
        """
        Generate a human-readable description of the class.

        Args:
            None

        Returns:
            desc (str): Prettified representation of the class
        """
        desc = "Tokenizer(remove_pattern={}, split_pattern={}, exclude={}, lowercase={}, n_stopwords={})".format(
            repr(self.remove_pattern),
            repr(self.split_pattern),
            repr(self.exclude),
            self.lowercase,
            len(self.stopwords))
        return desc

    def _keep_token(self,
                    token):
        """
        Check whether a token survives boundary, exclusion, and stopword filters

        Args:
            token (str): Candidate token

        Returns:
            keep (bool): Whether the token is kept
        """
        if not token:
            return False
        ## Captured Boundary Text (Split Patterns with Groups)
        if self._split_re.fullmatch(token):
            return False
        if self.exclude is not None and self.exclude in token.lower():
            return False
        if token in self.stopwords:
            return False
        return True

    def tokenize(self,
                 text):
        """
        Tokenize a single document.

        Args:
            text (str or None): Raw document text

        Returns:
            tokens (list of str): Tokens in order of appearance
        """
        if text is None:
            return []
        text = _clean_surrogate_unicode(text)
        ## Strip URLs, Retweet Markers, HTML Escapes
        if self._remove_re is not None:
            text = self._remove_re.sub("", text)
        if self.lowercase:
            text = text.lower()
        ## Split and Filter
        tokens = [t for t in self._splitter.tokenize(text) if self._keep_token(t)]
        return tokens

    def _tokenize_chunk(self,
                        texts):
        """

        """
        return list(map(self.tokenize, texts))

    def tokenize_corpus(self,
                        texts,
                        jobs=1,
                        chunksize=100,
                        verbose=False):
        """
        Tokenize a list of documents, optionally using multiprocessing.

        Args:
            texts (list of str): Raw documents
            jobs (int): Number of processes. 1 runs in the current process.
            chunksize (int): Documents per multiprocessing task
            verbose (bool): If True, show a progress bar

        Returns:
            token_lists (list of list of str): Tokens for each document, in input order
        """
        texts = list(texts)
        text_chunks = list(chunks(texts, chunksize))
        wrapper = lambda x: tqdm(x, total=len(text_chunks), desc="Tokenizing", file=sys.stdout) if verbose else x
        if jobs == 1:
            token_lists = [self._tokenize_chunk(c) for c in wrapper(text_chunks)]
        else:
            with Pool(processes=jobs) as mp:
                token_lists = list(wrapper(mp.imap(self._tokenize_chunk, text_chunks)))
        token_lists = flatten(token_lists)
        return token_lists
