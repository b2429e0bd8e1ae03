from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

DEFAULT_BASE_URL = "https://api.lardi-trans.com"
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_LANGUAGE = "uk"

Language = Literal["ru", "uk"]
LANGUAGES: tuple[str, ...] = ("ru", "uk")


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    language: Language = DEFAULT_LANGUAGE

    def __post_init__(self) -> None:
        # zero values fall back to defaults
        if not self.base_url:
            object.__setattr__(self, "base_url", DEFAULT_BASE_URL)
        if not self.timeout_s:
            object.__setattr__(self, "timeout_s", DEFAULT_TIMEOUT_S)
        if not self.language:
            object.__setattr__(self, "language", DEFAULT_LANGUAGE)
