"""
Exceptions raised by the SEO analysis pipeline
"""
from enum import Enum
from typing import Optional

ANALYSIS_FAILED_MESSAGE = "Failed to analyze the website"


class FailureKind(Enum):
    UNREACHABLE = "unreachable"
    BAD_STATUS = "bad_status"
    INTERNAL = "internal"


class AnalysisError(Exception):
    """
    The single failure surfaced to callers of the analyzer.

    The message is always the generic one; ``kind`` and ``status_code`` are
    there for callers that want to tell an unreachable site from an error
    status or an internal fault.
    """

    def __init__(self, kind: FailureKind, status_code: Optional[int] = None):
        super().__init__(ANALYSIS_FAILED_MESSAGE)
        self.kind = kind
        self.status_code = status_code

    def __repr__(self):
        return f"AnalysisError(kind={self.kind.value!r}, status_code={self.status_code!r})"
