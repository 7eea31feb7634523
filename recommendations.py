"""
Recommendation generation for SEO Analyzer

Recommendations are looked up by issue message in RECOMMENDATION_TABLE.
Issues are walked three times (critical, then warning, then info) so the
output is ordered by severity while keeping detection order within each
severity.
"""
import logging
from typing import Dict, Iterable, Tuple

import issue_detector as rules
from models import Issue, IssueType, Priority, Recommendation

logger = logging.getLogger(__name__)

MIN_RECOMMENDATIONS = 3

_OPTIMIZE_TITLE = Recommendation(
    priority=Priority.MEDIUM,
    title="Optimize page title length",
    description="Adjust your title to be between 50-60 characters to ensure it displays properly "
                "in search results.",
    impact="Ensures your full title is visible in search results",
)

RECOMMENDATION_TABLE: Dict[str, Recommendation] = {
    # critical
    rules.MISSING_TITLE: Recommendation(
        priority=Priority.HIGH,
        title="Add a page title",
        description="Create a descriptive title tag that accurately summarizes the page content in "
                    "50-60 characters.",
        impact="High impact on search rankings and click-through rates",
    ),
    rules.MISSING_H1: Recommendation(
        priority=Priority.HIGH,
        title="Add an H1 heading",
        description="Add a primary H1 heading that clearly describes the main topic of the page.",
        impact="Improves content structure and helps search engines understand your page",
    ),
    rules.MANY_IMAGES_MISSING_ALT: Recommendation(
        priority=Priority.HIGH,
        title="Add alt text to images",
        description="Add descriptive alt text to all images that conveys their content and function.",
        impact="Improves accessibility and helps search engines understand image content",
    ),
    rules.NOT_HTTPS: Recommendation(
        priority=Priority.HIGH,
        title="Switch to HTTPS",
        description="Implement SSL/TLS and redirect all HTTP traffic to HTTPS.",
        impact="Improves security, user trust, and is a ranking factor for search engines",
    ),
    # warning
    rules.MISSING_DESCRIPTION: Recommendation(
        priority=Priority.MEDIUM,
        title="Add a meta description",
        description="Create a compelling meta description of 150-160 characters that summarizes the "
                    "page content.",
        impact="Improves click-through rates from search results",
    ),
    rules.TITLE_TOO_SHORT: _OPTIMIZE_TITLE,
    rules.TITLE_TOO_LONG: _OPTIMIZE_TITLE,
    rules.MULTIPLE_H1: Recommendation(
        priority=Priority.MEDIUM,
        title="Use only one H1 heading",
        description="Consolidate multiple H1 headings into a single, descriptive H1 heading.",
        impact="Clarifies the main topic of your page for search engines",
    ),
    rules.SOME_IMAGES_MISSING_ALT: Recommendation(
        priority=Priority.MEDIUM,
        title="Add alt text to remaining images",
        description="Add descriptive alt text to all images that are missing it.",
        impact="Improves accessibility and image search visibility",
    ),
    rules.LARGE_HTML: Recommendation(
        priority=Priority.MEDIUM,
        title="Reduce HTML size",
        description="Minimize HTML by removing unnecessary comments, whitespace, and inline "
                    "scripts/styles.",
        impact="Improves page load speed and user experience",
    ),
    rules.MANY_SCRIPTS: Recommendation(
        priority=Priority.MEDIUM,
        title="Optimize JavaScript usage",
        description="Combine multiple script files, use async/defer attributes, and remove unused "
                    "scripts.",
        impact="Reduces render-blocking resources and improves page speed",
    ),
    rules.LOW_WORD_COUNT: Recommendation(
        priority=Priority.MEDIUM,
        title="Expand content depth",
        description="Add more comprehensive, valuable content to reach at least 300-500 words.",
        impact="Helps search engines understand the topic and may improve rankings",
    ),
    # info
    rules.MISSING_OPEN_GRAPH: Recommendation(
        priority=Priority.LOW,
        title="Add Open Graph tags",
        description="Implement og:title, og:description, og:image, and og:url tags for better "
                    "social sharing.",
        impact="Improves appearance when shared on social media platforms",
    ),
    rules.MISSING_TWITTER_CARD: Recommendation(
        priority=Priority.LOW,
        title="Add Twitter Card tags",
        description="Implement twitter:card, twitter:title, twitter:description, and twitter:image "
                    "tags.",
        impact="Improves appearance when shared on Twitter",
    ),
    rules.NO_STRUCTURED_DATA: Recommendation(
        priority=Priority.LOW,
        title="Implement structured data",
        description="Add JSON-LD structured data appropriate for your content type (e.g., Article, "
                    "Product, FAQ).",
        impact="Enables rich results in search and helps search engines understand content",
    ),
}

GENERIC_RECOMMENDATIONS: Tuple[Recommendation, ...] = (
    Recommendation(
        priority=Priority.MEDIUM,
        title="Improve internal linking",
        description="Add more contextual internal links to help users and search engines navigate "
                    "your site.",
        impact="Improves site structure and helps distribute page authority",
    ),
    Recommendation(
        priority=Priority.LOW,
        title="Optimize for mobile",
        description="Ensure your site is fully responsive and provides a good experience on all "
                    "devices.",
        impact="Mobile-friendliness is a ranking factor for search engines and affects user "
               "experience",
    ),
    Recommendation(
        priority=Priority.LOW,
        title="Improve page load speed",
        description="Optimize images, leverage browser caching, and minimize render-blocking "
                    "resources.",
        impact="Faster pages rank better and provide better user experience",
    ),
)

SEVERITY_PASSES = (IssueType.CRITICAL, IssueType.WARNING, IssueType.INFO)


def generate_recommendations(issues: Iterable[Issue]) -> Tuple[Recommendation, ...]:
    """Map issues to recommendations, padding with the generic set when few match"""
    issues = tuple(issues)
    recommendations = []

    for severity in SEVERITY_PASSES:
        for issue in issues:
            if issue.type is not severity:
                continue
            recommendation = RECOMMENDATION_TABLE.get(issue.message)
            if recommendation is not None:
                recommendations.append(recommendation)

    if len(recommendations) < MIN_RECOMMENDATIONS:
        logger.debug(f"Only {len(recommendations)} specific recommendations, adding generic ones")
        recommendations.extend(GENERIC_RECOMMENDATIONS)

    return tuple(recommendations)
