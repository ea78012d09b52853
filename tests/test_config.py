from app.config import Settings


def test_defaults(monkeypatch):
    for name in ("READING_WORDS_PER_MINUTE", "SPEAKING_WORDS_PER_MINUTE", "WORDS_PER_PAGE", "WORD_GOAL"):
        monkeypatch.delenv(name, raising=False)

    cfg = Settings(_env_file=None)

    assert cfg.reading_words_per_minute == 200
    assert cfg.speaking_words_per_minute == 130
    assert cfg.words_per_page == 250
    assert cfg.keyword_min_length == 3
    assert cfg.word_goal == 500


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("READING_WORDS_PER_MINUTE", "300")
    monkeypatch.setenv("WORD_GOAL", "1000")

    cfg = Settings(_env_file=None)

    assert cfg.reading_words_per_minute == 300
    assert cfg.word_goal == 1000


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("KEYWORD_MIN_LENGTH=5\nUNRELATED_KEY=ignored\n", encoding="utf-8")

    cfg = Settings(_env_file=env_file)

    assert cfg.keyword_min_length == 5
