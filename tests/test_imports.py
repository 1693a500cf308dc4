import importlib

MODULES = [
    'wordcrawl.config',
    'wordcrawl.container',
    'wordcrawl.domain',
    'wordcrawl.profiler',
    'wordcrawl.services.fork_join_pool',
    'wordcrawl.services.parallel_web_crawler',
    'wordcrawl.services.page_parser',
    'wordcrawl.services.crawler_config_parser',
    'wordcrawl.services.config_file_store',
    'wordcrawl.services.result_writer',
]

def test_imports():
    for m in MODULES:
        importlib.import_module(m)
