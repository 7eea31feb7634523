"""
Issue detection rules for SEO Analyzer

Each rule reads the fact model and appends at most the issues it owns.
Rules run in a fixed order and never short-circuit one another. The
message strings below are stable identifiers: the recommendation table
keys on them.
"""
import logging
from typing import List, Tuple

from models import FactModel, Issue, IssueType
from utils import round_half_up

logger = logging.getLogger(__name__)

MISSING_TITLE = "Missing page title"
TITLE_TOO_SHORT = "Title tag is too short"
TITLE_TOO_LONG = "Title tag is too long"
MISSING_DESCRIPTION = "Missing meta description"
DESCRIPTION_TOO_SHORT = "Meta description is too short"
DESCRIPTION_TOO_LONG = "Meta description is too long"
MISSING_H1 = "Missing H1 heading"
MULTIPLE_H1 = "Multiple H1 headings"
MANY_IMAGES_MISSING_ALT = "Many images missing alt text"
SOME_IMAGES_MISSING_ALT = "Some images missing alt text"
NOT_HTTPS = "Website not using HTTPS"
LARGE_HTML = "Large HTML size"
MANY_SCRIPTS = "High number of script tags"
MANY_STYLESHEETS = "High number of stylesheet links"
LOW_WORD_COUNT = "Low word count"
POOR_READABILITY = "Poor readability score"
MISSING_OPEN_GRAPH = "Missing Open Graph tags"
MISSING_TWITTER_CARD = "Missing Twitter Card tags"
NO_STRUCTURED_DATA = "No structured data found"

TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 160
ALT_MISSING_CRITICAL_PERCENT = 50
MAX_HTML_SIZE = 100000
MAX_SCRIPTS = 20
MAX_STYLESHEETS = 10
MIN_WORD_COUNT = 300
MIN_READABILITY = 30


def _check_title(facts: FactModel) -> List[Issue]:
    title = facts.meta_tags.title
    if not title:
        return [Issue(IssueType.CRITICAL, MISSING_TITLE,
                      "The page does not have a title tag, which is crucial for SEO.")]
    if len(title) < TITLE_MIN_LENGTH:
        return [Issue(IssueType.WARNING, TITLE_TOO_SHORT,
                      f'Current title ({len(title)} characters): "{title}". '
                      f'Recommended length is 50-60 characters.')]
    if len(title) > TITLE_MAX_LENGTH:
        return [Issue(IssueType.WARNING, TITLE_TOO_LONG,
                      f"Current title ({len(title)} characters) may be truncated in search results. "
                      f"Recommended length is 50-60 characters.")]
    return []


def _check_description(facts: FactModel) -> List[Issue]:
    description = facts.meta_tags.description
    if not description:
        return [Issue(IssueType.WARNING, MISSING_DESCRIPTION,
                      "The page does not have a meta description, which helps improve "
                      "click-through rates from search results.")]
    if len(description) < DESCRIPTION_MIN_LENGTH:
        return [Issue(IssueType.WARNING, DESCRIPTION_TOO_SHORT,
                      f"Current description ({len(description)} characters). "
                      f"Recommended length is 150-160 characters.")]
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return [Issue(IssueType.INFO, DESCRIPTION_TOO_LONG,
                      f"Current description ({len(description)} characters) may be truncated in "
                      f"search results. Recommended length is 150-160 characters.")]
    return []


def _check_h1(facts: FactModel) -> List[Issue]:
    h1_count = len(facts.headings.h1)
    if h1_count == 0:
        return [Issue(IssueType.CRITICAL, MISSING_H1,
                      "The page does not have an H1 heading, which is important for both SEO "
                      "and accessibility.")]
    if h1_count > 1:
        return [Issue(IssueType.WARNING, MULTIPLE_H1,
                      f"The page has {h1_count} H1 headings. It's recommended to have only one "
                      f"H1 heading per page.")]
    return []


def _check_images(facts: FactModel) -> List[Issue]:
    images = facts.images
    if images.total == 0 or images.without_alt == 0:
        return []

    percentage = round_half_up(images.without_alt / images.total * 100)
    details = (f"{images.without_alt} out of {images.total} images ({percentage}%) are missing "
               f"alt text, which is important for accessibility and SEO.")
    if percentage > ALT_MISSING_CRITICAL_PERCENT:
        return [Issue(IssueType.CRITICAL, MANY_IMAGES_MISSING_ALT, details)]
    return [Issue(IssueType.WARNING, SOME_IMAGES_MISSING_ALT, details)]


def _check_security(facts: FactModel) -> List[Issue]:
    if facts.security.https:
        return []
    return [Issue(IssueType.CRITICAL, NOT_HTTPS,
                  "The website is not using HTTPS, which is important for security and is a "
                  "ranking factor for search engines.")]


def _check_performance(facts: FactModel) -> List[Issue]:
    performance = facts.performance
    resources = performance.resource_count
    issues = []

    if performance.html_size > MAX_HTML_SIZE:
        issues.append(Issue(IssueType.WARNING, LARGE_HTML,
                            f"The HTML size is {round_half_up(performance.html_size / 1024)} KB, "
                            f"which may impact page load speed. Consider optimizing the HTML."))
    if resources.scripts > MAX_SCRIPTS:
        issues.append(Issue(IssueType.WARNING, MANY_SCRIPTS,
                            f"The page has {resources.scripts} script tags, which may impact page "
                            f"load speed. Consider combining or optimizing scripts."))
    if resources.stylesheets > MAX_STYLESHEETS:
        issues.append(Issue(IssueType.WARNING, MANY_STYLESHEETS,
                            f"The page has {resources.stylesheets} stylesheet links, which may "
                            f"impact page load speed. Consider combining stylesheets."))
    return issues


def _check_content(facts: FactModel) -> List[Issue]:
    content = facts.content
    issues = []

    if content.word_count < MIN_WORD_COUNT:
        issues.append(Issue(IssueType.WARNING, LOW_WORD_COUNT,
                            f"The page has only {content.word_count} words. Search engines "
                            f"typically prefer content-rich pages with at least 300 words."))
    if content.readability_score < MIN_READABILITY:
        issues.append(Issue(IssueType.WARNING, POOR_READABILITY,
                            "The content may be difficult to read. Consider simplifying sentences "
                            "and using more common words."))
    return issues


def _check_social(facts: FactModel) -> List[Issue]:
    issues = []
    if not facts.meta_tags.og_tags:
        issues.append(Issue(IssueType.INFO, MISSING_OPEN_GRAPH,
                            "The page does not have Open Graph tags, which improve how the page "
                            "appears when shared on social media."))
    if not facts.meta_tags.twitter_tags:
        issues.append(Issue(IssueType.INFO, MISSING_TWITTER_CARD,
                            "The page does not have Twitter Card tags, which improve how the page "
                            "appears when shared on Twitter."))
    return issues


def _check_structured_data(facts: FactModel) -> List[Issue]:
    if facts.structured_data:
        return []
    return [Issue(IssueType.INFO, NO_STRUCTURED_DATA,
                  "The page does not have any structured data (JSON-LD), which can help search "
                  "engines understand the content better.")]


RULES = (
    _check_title,
    _check_description,
    _check_h1,
    _check_images,
    _check_security,
    _check_performance,
    _check_content,
    _check_social,
    _check_structured_data,
)


def detect_issues(facts: FactModel) -> Tuple[Issue, ...]:
    """Run every rule in order and return all issues found"""
    issues = []
    for rule in RULES:
        issues.extend(rule(facts))

    logger.debug(f"Detected {len(issues)} issues")
    return tuple(issues)
