"""
Overall score calculation for SEO Analyzer
"""
from typing import Iterable

from models import Issue, IssueType

PENALTIES = {
    IssueType.CRITICAL: 15,
    IssueType.WARNING: 5,
    IssueType.INFO: 2,
}


def calculate_score(issues: Iterable[Issue]) -> int:
    """100 minus a fixed penalty per issue type, clamped to 0-100"""
    score = 100 - sum(PENALTIES[issue.type] for issue in issues)
    return max(0, min(100, score))
