import argparse
import logging
import sys
from typing import Optional, Sequence

from wordcrawl import config
from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigNotFoundError, InvalidConfigError
from wordcrawl.services.protocols import PageParser, WebCrawler
from wordcrawl.services.result_writer import CrawlResultWriter

logger = logging.getLogger("wordcrawl")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wordcrawl",
        description="Crawl starting pages in parallel and report the most popular words.",
    )
    parser.add_argument("config", help="Path to a JSON or YAML crawl configuration file")
    parser.add_argument("--result-path", help="Write the JSON result here instead of resultPath / stdout")
    parser.add_argument("--profile-output-path", help="Append profiling data here instead of profileOutputPath / stdout")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = container or Container()

    try:
        data = container.config_file_store().load(args.config)
        crawl_config = container.config_parser().parse(data)
    except (ConfigNotFoundError, InvalidConfigError) as e:
        logger.error("Invalid crawl configuration: %s", e)
        return 2

    profiler = container.profiler()
    page_parser = profiler.wrap(PageParser, container.page_parser(ignored_words=crawl_config.ignored_words))
    crawler = profiler.wrap(WebCrawler, container.web_crawler(config=crawl_config, page_parser=page_parser))

    result = crawler.crawl(crawl_config.start_pages)

    result_path = args.result_path or crawl_config.result_path
    CrawlResultWriter(result).write(result_path or sys.stdout)
    if result_path:
        logger.info("Wrote crawl result to %s", result_path)

    profile_path = args.profile_output_path or crawl_config.profile_output_path
    profiler.write_data(profile_path or sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
