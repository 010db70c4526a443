"""Lexical CV / job description similarity.

TF-IDF only: the job match score is a transparent word-overlap measure,
not a semantic model.
"""

import logging

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

logger = logging.getLogger(__name__)

# Generic job-ad filler; terms that also appear here get a low IDF
_BACKGROUND_CORPUS = (
    "the successful candidate will have relevant experience and strong skills",
    "we are looking for a motivated professional to join our team in ireland",
    "responsibilities include working with stakeholders and delivering results",
    "competitive salary, hybrid working and a great benefits package",
)


def _vectorizer(max_features: int) -> TfidfVectorizer:
    return TfidfVectorizer(
        stop_words="english",
        max_features=max_features,
        sublinear_tf=True,
        ngram_range=(1, 2),
    )


def tfidf_cosine_similarity(text_a: str, text_b: str) -> float:
    """Cosine similarity of the two texts' TF-IDF vectors, 0.0 when either is empty."""
    if not text_a.strip() or not text_b.strip():
        return 0.0

    try:
        matrix = _vectorizer(5000).fit_transform([text_a, text_b])
    except ValueError:
        # Empty vocabulary: both texts are stop words only
        return 0.0
    return float(sklearn_cosine(matrix[0:1], matrix[1:2])[0][0])


def job_match_score(cv_text: str, job_description: str) -> int:
    """Lexical CV/job-description similarity as 0-100."""
    return min(100, max(0, round(tfidf_cosine_similarity(cv_text, job_description) * 100)))


def extract_tfidf_keywords(text: str, top_n: int = 20) -> list[str]:
    """Most distinctive terms of a job description, best first."""
    if not text.strip():
        return []

    vectorizer = _vectorizer(3000)
    try:
        matrix = vectorizer.fit_transform([text, *_BACKGROUND_CORPUS])
    except ValueError:
        logger.debug("TF-IDF keyword extraction found no usable terms")
        return []

    terms = vectorizer.get_feature_names_out()
    weights = matrix[0].toarray().ravel()
    ranked = np.argsort(weights)[::-1][:top_n]
    return [str(terms[i]) for i in ranked if weights[i] > 0 and len(terms[i]) > 1]
