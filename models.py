"""
Data models for SEO Analyzer

Every model is frozen: the fact model is built once per analysis and only
read afterwards. ``to_dict`` produces the camelCase JSON shape callers and
UIs inspect.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple


class IssueType(Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _frozen_mapping(values: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class MetaTagFacts:
    """Meta tags read from the document head"""
    title: str = ""
    description: str = ""
    robots: str = ""
    canonical: str = ""
    viewport: str = ""
    og_tags: Mapping[str, str] = field(default_factory=lambda: _frozen_mapping({}))
    twitter_tags: Mapping[str, str] = field(default_factory=lambda: _frozen_mapping({}))

    def __post_init__(self):
        object.__setattr__(self, "og_tags", _frozen_mapping(self.og_tags))
        object.__setattr__(self, "twitter_tags", _frozen_mapping(self.twitter_tags))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "robots": self.robots,
            "canonical": self.canonical,
            "viewport": self.viewport,
            "ogTags": dict(self.og_tags),
            "twitterTags": dict(self.twitter_tags),
        }


@dataclass(frozen=True)
class HeadingFacts:
    """Heading texts per level, in document order"""
    h1: Tuple[str, ...] = ()
    h2: Tuple[str, ...] = ()
    h3: Tuple[str, ...] = ()
    h4: Tuple[str, ...] = ()
    h5: Tuple[str, ...] = ()
    h6: Tuple[str, ...] = ()

    def level(self, number: int) -> Tuple[str, ...]:
        return getattr(self, f"h{number}")

    def to_dict(self) -> Dict[str, List[str]]:
        return {f"h{n}": list(self.level(n)) for n in range(1, 7)}


@dataclass(frozen=True)
class ImageDetail:
    src: str
    alt: str
    has_alt: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"src": self.src, "alt": self.alt, "hasAlt": self.has_alt}


@dataclass(frozen=True)
class ImageFacts:
    """Image counts plus the first images in document order"""
    total: int = 0
    with_alt: int = 0
    without_alt: int = 0
    details: Tuple[ImageDetail, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "withAlt": self.with_alt,
            "withoutAlt": self.without_alt,
            "details": [detail.to_dict() for detail in self.details],
        }


@dataclass(frozen=True)
class LinkDetail:
    url: str
    text: str
    is_external: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "text": self.text, "isExternal": self.is_external}


@dataclass(frozen=True)
class LinkFacts:
    """Internal/external link counts plus the first links in document order"""
    internal: int = 0
    external: int = 0
    details: Tuple[LinkDetail, ...] = ()

    @property
    def total(self) -> int:
        return self.internal + self.external

    def to_dict(self) -> Dict[str, Any]:
        return {
            "internal": self.internal,
            "external": self.external,
            "details": [detail.to_dict() for detail in self.details],
        }


@dataclass(frozen=True)
class ResourceCount:
    scripts: int = 0
    stylesheets: int = 0
    images: int = 0
    iframes: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "scripts": self.scripts,
            "stylesheets": self.stylesheets,
            "images": self.images,
            "iframes": self.iframes,
        }


@dataclass(frozen=True)
class PerformanceFacts:
    html_size: int = 0
    resource_count: ResourceCount = field(default_factory=ResourceCount)

    def to_dict(self) -> Dict[str, Any]:
        return {"htmlSize": self.html_size, "resourceCount": self.resource_count.to_dict()}


@dataclass(frozen=True)
class SecurityFacts:
    https: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {"https": self.https}


@dataclass(frozen=True)
class ContentFacts:
    word_count: int = 0
    paragraph_count: int = 0
    readability_score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wordCount": self.word_count,
            "paragraphCount": self.paragraph_count,
            "readabilityScore": self.readability_score,
        }


@dataclass(frozen=True)
class FactModel:
    """Every fact group extracted from one page"""
    meta_tags: MetaTagFacts
    headings: HeadingFacts
    images: ImageFacts
    links: LinkFacts
    performance: PerformanceFacts
    security: SecurityFacts
    structured_data: Tuple[Any, ...]
    content: ContentFacts


@dataclass(frozen=True)
class Issue:
    type: IssueType
    message: str
    details: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": self.type.value, "message": self.message}
        if self.details:
            data["details"] = self.details
        return data


@dataclass(frozen=True)
class Recommendation:
    priority: Priority
    title: str
    description: str
    impact: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "priority": self.priority.value,
            "title": self.title,
            "description": self.description,
            "impact": self.impact,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Root output of one analysis"""
    url: str
    timestamp: str
    facts: FactModel
    issues: Tuple[Issue, ...]
    recommendations: Tuple[Recommendation, ...]
    overall_score: int

    def to_dict(self) -> Dict[str, Any]:
        facts = self.facts
        return {
            "url": self.url,
            "timestamp": self.timestamp,
            "metaTags": facts.meta_tags.to_dict(),
            "headings": facts.headings.to_dict(),
            "images": facts.images.to_dict(),
            "links": facts.links.to_dict(),
            "performance": facts.performance.to_dict(),
            "security": facts.security.to_dict(),
            "structuredData": list(facts.structured_data),
            "contentAnalysis": facts.content.to_dict(),
            "overallScore": self.overall_score,
            "issues": [issue.to_dict() for issue in self.issues],
            "recommendations": [rec.to_dict() for rec in self.recommendations],
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)
