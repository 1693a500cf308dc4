import json
import os
from typing import TextIO, Union

from wordcrawl.domain.crawl_result import CrawlResult


class CrawlResultWriter:
    """Serializes a CrawlResult as JSON, keeping the popular-word ordering."""

    def __init__(self, result: CrawlResult):
        self.result = result

    def write(self, destination: Union[str, os.PathLike, TextIO]) -> None:
        if isinstance(destination, (str, os.PathLike)):
            with open(destination, "w", encoding="utf-8") as f:
                self._dump(f)
            return
        self._dump(destination)

    def _dump(self, writer: TextIO) -> None:
        json.dump(self.result.to_dict(), writer, indent=2)
        writer.write("\n")
