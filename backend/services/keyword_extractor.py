"""Job-description keyword extraction and overlap with the resume.

Keywords are words the JD repeats: anything mentioned at least twice,
longer than three characters and not on the common-word list.
"""

import logging
import re
from collections import Counter

from models.schemas.job_match_analysis import JobMatchAnalysis
from services.rating import round_half_up

logger = logging.getLogger(__name__)

NO_DESCRIPTION_SCORE = 70
MAX_KEYWORDS = 20
MIN_KEYWORD_LENGTH = 4

# ---------------------------------------------------------------------------
# Words that show up in every JD and say nothing about the role
# ---------------------------------------------------------------------------
COMMON_WORDS: frozenset[str] = frozenset({
    "the", "and", "for", "are", "with", "will", "this", "that", "from",
    "they", "have", "been", "were", "said", "each", "which", "their",
    "time", "work", "team", "role", "position", "company", "experience",
})

# ASCII word characters only: "café" splits into "caf"
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s]")


def _tokenize(text: str) -> list[str]:
    return _NON_WORD_RE.sub(" ", text.lower()).split()


def is_common_word(word: str) -> bool:
    return word in COMMON_WORDS


def extract_keywords(text: str, top_n: int = MAX_KEYWORDS) -> list[str]:
    """Extract repeated, non-trivial words from text.

    Ordered by descending frequency; ties keep first-seen order.
    """
    words = [
        w for w in _tokenize(text)
        if len(w) >= MIN_KEYWORD_LENGTH and not is_common_word(w)
    ]
    counts = Counter(words)
    return [word for word, count in counts.most_common() if count > 1][:top_n]


def match_keywords(resume_lower: str, keywords: list[str]) -> list[str]:
    """Return the keywords that appear in the resume as substrings."""
    return [kw for kw in keywords if kw.lower() in resume_lower]


def analyze_job_description_match(resume_lower: str, job_description: str) -> JobMatchAnalysis:
    if not job_description or not job_description.strip():
        return JobMatchAnalysis(score=NO_DESCRIPTION_SCORE)

    keywords = extract_keywords(job_description)
    relevant = match_keywords(resume_lower, keywords)
    score = round_half_up(len(relevant) / max(len(keywords), 1) * 100)
    logger.debug("JD keywords relevant %d/%d", len(relevant), len(keywords))
    return JobMatchAnalysis(score=score, keywords=keywords, relevant_keywords=relevant)
