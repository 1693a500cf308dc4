"""Dependency injection container for the application."""
import time

from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.profiler import Profiler
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser
from wordcrawl.services.html_text_extractor import HtmlTextExtractor
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.link_extractor import LinkExtractor
from wordcrawl.services.page_parser import HtmlPageParser
from wordcrawl.services.parallel_web_crawler import ParallelWebCrawler


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "WordCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for a single outbound HTTP request. The crawl-wide budget is the
#   `timeoutSeconds` value of the crawl configuration file.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "WordCrawl/0.1"),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the WordCrawl application.

    Per-crawl settings are not known until a config file is read, so the
    parser and crawler are Factories that take them as call-time kwargs:

        parser = container.page_parser(ignored_words=cfg.ignored_words)
        crawler = container.web_crawler(config=cfg, page_parser=parser)
    """

    # Configuration
    config = providers.Configuration(default=ENV)

    config_file_store = providers.Singleton(ConfigFileStore)

    config_parser = providers.Singleton(CrawlerConfigParser)

    # One profiler per process run; every wrapper shares its state.
    profiler = providers.Singleton(Profiler)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int)
    )

    text_extractor = providers.Singleton(HtmlTextExtractor)

    link_extractor = providers.Singleton(LinkExtractor)

    page_parser = providers.Factory(
        HtmlPageParser,
        http_service=http_service,
        text_extractor=text_extractor,
        link_extractor=link_extractor,
    )

    crawl_policy = providers.Singleton(CrawlPolicy)

    web_crawler = providers.Factory(
        ParallelWebCrawler,
        clock=providers.Object(time.monotonic),
        crawl_policy=crawl_policy,
    )
