import os
import re
from datetime import timedelta
from typing import Any, Iterable, Optional

from wordcrawl.domain.config import CrawlConfiguration
from wordcrawl.exceptions import InvalidConfigError

# Config files use the camelCase keys of the original JSON format; snake_case
# spellings are accepted as well.
_KEYS = {
    "start_pages": ("startPages", "start_pages"),
    "ignored_urls": ("ignoredUrls", "ignored_urls"),
    "ignored_words": ("ignoredWords", "ignored_words"),
    "parallelism": ("parallelism",),
    "max_depth": ("maxDepth", "max_depth"),
    "timeout_seconds": ("timeoutSeconds", "timeout_seconds"),
    "popular_word_count": ("popularWordCount", "popular_word_count"),
    "profile_output_path": ("profileOutputPath", "profile_output_path"),
    "result_path": ("resultPath", "result_path"),
}


class CrawlerConfigParser:
    """Parse a JSON/YAML dict into a CrawlConfiguration.

    Responsibility: schema/validation for config files.
    It does NOT perform filesystem IO.
    """

    def parse(self, data: dict) -> CrawlConfiguration:
        if not isinstance(data, dict):
            raise InvalidConfigError("crawl configuration must be a mapping")

        timeout_seconds = self._number(data, "timeout_seconds", 1)
        return CrawlConfiguration(
            start_pages=self._strings(data, "start_pages"),
            ignored_urls=self._patterns(data, "ignored_urls"),
            ignored_words=self._patterns(data, "ignored_words"),
            parallelism=self._int(data, "parallelism", os.cpu_count() or 1),
            max_depth=self._int(data, "max_depth", 0),
            timeout=timedelta(seconds=timeout_seconds),
            popular_word_count=self._int(data, "popular_word_count", 0),
            profile_output_path=self._optional_str(data, "profile_output_path"),
            result_path=self._optional_str(data, "result_path"),
        )

    def _get(self, data: dict, field: str) -> Any:
        for key in _KEYS[field]:
            if key in data:
                return data[key]
        return None

    def _int(self, data: dict, field: str, default: int) -> int:
        raw = self._get(data, field)
        if raw is None:
            return default
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise InvalidConfigError(f"{_KEYS[field][0]} must be an integer, got {raw!r}")
        return raw

    def _number(self, data: dict, field: str, default: float) -> float:
        raw = self._get(data, field)
        if raw is None:
            return default
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise InvalidConfigError(f"{_KEYS[field][0]} must be a number, got {raw!r}")
        return raw

    def _optional_str(self, data: dict, field: str) -> Optional[str]:
        raw = self._get(data, field)
        if raw is None or raw == "":
            return None
        if not isinstance(raw, str):
            raise InvalidConfigError(f"{_KEYS[field][0]} must be a string, got {raw!r}")
        return raw

    def _strings(self, data: dict, field: str) -> list[str]:
        raw = self._get(data, field)
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
            raise InvalidConfigError(f"{_KEYS[field][0]} must be a list of strings")
        return list(raw)

    def _patterns(self, data: dict, field: str) -> list[re.Pattern]:
        return list(self._compile_all(self._strings(data, field), _KEYS[field][0]))

    def _compile_all(self, raw_patterns: Iterable[str], name: str):
        for raw in raw_patterns:
            try:
                yield re.compile(raw)
            except re.error as e:
                raise InvalidConfigError(f"invalid pattern in {name}: {raw!r} ({e})") from e
