"""Custom exceptions for WordCrawl."""


class ConfigNotFoundError(Exception):
    """Raised when a requested crawl configuration file cannot be found."""

    def __init__(self, config_path: str, reason: str = "not found"):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Config '{config_path}' {reason}")


class InvalidConfigError(ValueError):
    """Raised when crawl configuration values are missing, malformed or out of range."""


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class ProfilerConfigurationError(Exception):
    """Raised when an interface handed to the profiler declares no profiled methods."""

    def __init__(self, interface: type):
        self.interface = interface
        super().__init__(f"{interface.__qualname__} does not declare any @profiled methods")
