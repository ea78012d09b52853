# app/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリ全体で使う設定クラス。
    .env から環境変数を読み込み、属性として参照できるようにする。

    ※ 解析エンジン（services / agents）は settings を直接参照しない。
       API / パイプライン側で引数として渡す。
    """

    # ---------- 推定値のレート ----------
    # READING_WORDS_PER_MINUTE=250 などと .env に書けば上書きされる
    reading_words_per_minute: int = 200
    speaking_words_per_minute: int = 130
    words_per_page: int = 250

    # ---------- キーワード密度 ----------
    keyword_min_length: int = 3

    # ---------- 目標単語数 ----------
    word_goal: int = 500

    # ---------- ログ ----------
    log_level: str = "INFO"

    # ---------- Pydantic Settings 設定 ----------
    model_config = SettingsConfigDict(
        env_file=".env",            # .env を読む
        env_file_encoding="utf-8",
        extra="ignore",             # 定義外の環境変数があっても無視（エラーにしない）
    )


@lru_cache
def get_settings() -> Settings:
    """Settings をシングルトン的に使うためのヘルパ。"""
    return Settings()


# 他のモジュールからは `from app.config import settings` で利用
settings = get_settings()
