"""
Configuration file for SEO Analyzer
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

SINK_KINDS = ("log", "sqlite", "none")


@dataclass
class AnalyzerConfig:
    """Configuration settings for the SEO analyzer"""

    # Fetch settings
    user_agent: str = "SEO Analyzer Bot/1.0"
    timeout: int = 15

    # Result storage hook
    sink: str = "log"
    db_path: str = "seo_analysis.db"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(levelname)s - %(message)s"
    log_dir: Optional[str] = None

    def __post_init__(self):
        self.user_agent = os.environ.get("SEO_ANALYZER_USER_AGENT", self.user_agent)
        self.timeout = int(os.environ.get("SEO_ANALYZER_TIMEOUT", self.timeout))
        self.sink = os.environ.get("SEO_ANALYZER_SINK", self.sink)
        self.db_path = os.environ.get("SEO_ANALYZER_DB_PATH", self.db_path)
        self.log_level = os.environ.get("SEO_ANALYZER_LOG_LEVEL", self.log_level).upper()
        self.log_dir = os.environ.get("SEO_ANALYZER_LOG_DIR", self.log_dir)

        if self.sink not in SINK_KINDS:
            raise ValueError(f"Unknown result sink '{self.sink}', expected one of {SINK_KINDS}")
        if not isinstance(getattr(logging, self.log_level, None), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")
        if self.timeout <= 0:
            raise ValueError("Timeout must be a positive number of seconds")

# Default configuration instance
config = AnalyzerConfig()
