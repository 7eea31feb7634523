"""
Logging setup for SEO Analyzer
"""
import os
import logging
from typing import Optional

from config import config


def setup_logging(log_level: str = None, log_dir: Optional[str] = None):
    """
    Configure the root logger.

    Console output is always on. With ``log_dir`` set, everything is also
    written to analyzer.log, errors to errors.log, and stage timings from the
    ``performance`` logger to performance.log.
    """
    log_level = (log_level or config.log_level).upper()

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    simple_formatter = logging.Formatter(config.log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level))
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    perf_logger = logging.getLogger('performance')
    perf_logger.handlers.clear()

    if not log_dir:
        # stage timings only show up at DEBUG on the console
        perf_logger.setLevel(logging.DEBUG if log_level == "DEBUG" else logging.WARNING)
        perf_logger.propagate = True
        return root_logger

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    file_handler = logging.FileHandler(os.path.join(log_dir, 'analyzer.log'), encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(file_handler)

    error_handler = logging.FileHandler(os.path.join(log_dir, 'errors.log'), encoding='utf-8')
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_handler)

    perf_handler = logging.FileHandler(os.path.join(log_dir, 'performance.log'), encoding='utf-8')
    perf_handler.setLevel(logging.INFO)
    perf_handler.setFormatter(simple_formatter)
    perf_logger.addHandler(perf_handler)
    perf_logger.setLevel(logging.INFO)
    perf_logger.propagate = False

    return root_logger
