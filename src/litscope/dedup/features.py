"""Feature matrix builder: texts -> sparse document-term matrix.

Every document goes through the same normalization:

1. lowercase
2. strip URLs
3. split on hyphens, separators, punctuation and symbols
4. drop numeric tokens and English stopwords

Terms are then counted over one vocabulary shared by the whole corpus, so
rows are directly comparable.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from scipy.sparse import csr_matrix
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS, CountVectorizer

_URL_RE = re.compile(r"(?:https?://|ftp://|www\.)\S+", re.IGNORECASE)
# Word characters except underscore; hyphens, punctuation and symbols all split.
_TERM_RE = re.compile(r"[^\W_]+")


@dataclass(frozen=True)
class FeatureMatrix:
    matrix: csr_matrix
    vocabulary: list[str]

    @property
    def shape(self) -> tuple[int, int]:
        return self.matrix.shape


def normalize_terms(text: str, *, remove_stopwords: bool = True) -> list[str]:
    """Tokenize *text* into normalized terms, in order of appearance."""
    if not isinstance(text, str):
        text = "" if text is None else str(text)
    lowered = _URL_RE.sub(" ", text.lower())
    terms = []
    for term in _TERM_RE.findall(lowered):
        if term.isdigit():
            continue
        if remove_stopwords and term in ENGLISH_STOP_WORDS:
            continue
        terms.append(term)
    return terms


def _identity(terms: list[str]) -> list[str]:
    return terms


def build_feature_matrix(
    texts: Sequence[str], *, remove_stopwords: bool = True
) -> FeatureMatrix:
    """Build an N x V term-count matrix over the vocabulary of *texts*.

    A corpus whose documents normalize to nothing yields an N x 0 matrix.
    """
    tokenized = [normalize_terms(t, remove_stopwords=remove_stopwords) for t in texts]
    if not any(tokenized):
        return FeatureMatrix(matrix=csr_matrix((len(tokenized), 0)), vocabulary=[])

    vectorizer = CountVectorizer(analyzer=_identity)
    matrix = vectorizer.fit_transform(tokenized)
    return FeatureMatrix(
        matrix=csr_matrix(matrix),
        vocabulary=list(vectorizer.get_feature_names_out()),
    )
