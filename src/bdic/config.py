# src/bdic/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from bdic.fetchers.http import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

BING_URL = "https://cn.bing.com/dict/clientsearch?mkt=zh-CN&setLang=zh&form=BDVEHC&ClientVer=BDDTV3.5.1.4320&q="
YOUDAO_URL = "https://dict.youdao.com/w/"
DICTIONARIES = ("bing", "youdao")


@dataclass(frozen=True)
class Settings:
    bing_url: str = BING_URL
    youdao_url: str = YOUDAO_URL
    default_dict: str = "bing"
    timeout_seconds: float = 15
    user_agent: str = DEFAULT_USER_AGENT

    def base_url(self, dictionary: str) -> str:
        return self.youdao_url if dictionary == "youdao" else self.bing_url


def load_settings() -> Settings:
    """Load settings from the environment (and a .env file, if there is one)."""
    load_dotenv()

    default_dict = os.getenv("BDIC_DICT", "bing").strip().lower()
    if default_dict not in DICTIONARIES:
        logger.warning("Ignoring BDIC_DICT=%r, expected one of %s", default_dict, DICTIONARIES)
        default_dict = "bing"

    timeout = Settings.timeout_seconds
    raw_timeout = os.getenv("BDIC_TIMEOUT")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning("Ignoring BDIC_TIMEOUT=%r, not a number", raw_timeout)

    return Settings(
        bing_url=os.getenv("BDIC_BING_URL", BING_URL),
        youdao_url=os.getenv("BDIC_YOUDAO_URL", YOUDAO_URL),
        default_dict=default_dict,
        timeout_seconds=timeout,
        user_agent=os.getenv("BDIC_USER_AGENT", DEFAULT_USER_AGENT),
    )
