from services.keyword_extractor import (
    COMMON_WORDS,
    MAX_KEYWORDS,
    analyze_job_description_match,
    extract_keywords,
    is_common_word,
    match_keywords,
)


def test_extract_keywords_keeps_repeated_words():
    jd = "Python developers build Python services. Services run on Kubernetes. Kubernetes, Kubernetes!"
    assert extract_keywords(jd) == ["kubernetes", "python", "services"]


def test_extract_keywords_drops_single_mentions():
    assert extract_keywords("Terraform once. Ansible once more.") == ["once"]


def test_extract_keywords_drops_short_words():
    # "aws" and "gcp" repeat but are only three characters
    assert extract_keywords("AWS AWS GCP GCP Azure Azure") == ["azure"]


def test_extract_keywords_drops_common_words():
    jd = "Experience experience. Team team. Company company. Position position."
    assert extract_keywords(jd) == []


def test_extract_keywords_strips_punctuation():
    assert extract_keywords("micro-services, (micro) services; services.") == ["services", "micro"]


def test_extract_keywords_splits_on_non_ascii_letters():
    # "café" becomes "caf", too short to keep
    assert extract_keywords("café café naïve naïve") == []
    assert extract_keywords("kubernetes déploiement kubernetes déploiement") == ["kubernetes", "ploiement"]


def test_extract_keywords_ties_keep_first_seen_order():
    jd = "golang rust golang rust elixir elixir"
    assert extract_keywords(jd) == ["golang", "rust", "elixir"]


def test_extract_keywords_frequency_first():
    jd = "alpha beta beta gamma gamma gamma alpha"
    assert extract_keywords(jd) == ["gamma", "alpha", "beta"]


def test_extract_keywords_limit():
    jd = " ".join(f"keyword{i} keyword{i}" for i in range(30))
    keywords = extract_keywords(jd)
    assert len(keywords) == MAX_KEYWORDS == 20
    assert keywords[0] == "keyword0"
    assert extract_keywords(jd, top_n=5) == [f"keyword{i}" for i in range(5)]


def test_is_common_word():
    assert is_common_word("experience")
    assert is_common_word("the")
    assert not is_common_word("python")
    assert len(COMMON_WORDS) == 24


def test_match_keywords_substring():
    assert match_keywords("built microservices in golang", ["services", "golang", "rust"]) == ["services", "golang"]


def test_job_match_blank_description():
    for jd in ("", "   \n"):
        result = analyze_job_description_match("anything", jd)
        assert result.score == 70
        assert result.relevant_keywords == []


def test_job_match_no_repeated_keywords_scores_zero():
    result = analyze_job_description_match("python", "A one-off description.")
    assert result.keywords == []
    assert result.score == 0


def test_job_match_partial_overlap():
    jd = "Python developers build Python services. Services run on Kubernetes. Kubernetes, Kubernetes!"
    result = analyze_job_description_match("python services on bare metal", jd)
    assert result.keywords == ["kubernetes", "python", "services"]
    assert result.relevant_keywords == ["python", "services"]
    assert result.score == 67
