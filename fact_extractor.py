"""
Fact extraction module for SEO Analyzer

Turns a parsed page into the typed fact groups the issue detector reads.
Every routine tolerates a partial or empty tree and falls back to empty
values; nothing here raises on bad markup.
"""
import re
import json
import logging
from typing import Any, Dict, List, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag

from models import (
    MetaTagFacts, HeadingFacts, ImageDetail, ImageFacts, LinkDetail, LinkFacts,
    ResourceCount, PerformanceFacts, SecurityFacts, ContentFacts, FactModel,
)
from utils import (
    has_scheme, resolve_against_origin, url_hostname, collapse_whitespace,
    safe_extract_text, safe_extract_attribute,
)

logger = logging.getLogger(__name__)

JSON_LD_TYPE = 'application/ld+json'
_SENTENCE_SPLIT_RE = re.compile(r'[.!?]+')
_OG_PROPERTY_RE = re.compile(r'^og:')
_TWITTER_NAME_RE = re.compile(r'^twitter:')


def parse_html(html: str) -> BeautifulSoup:
    """Parse raw HTML into a queryable tree; malformed markup degrades, never raises"""
    return BeautifulSoup(html or "", 'html.parser')


class FactExtractor:
    """Extracts meta tags, headings, images, links, structured data and content metrics"""

    MAX_IMAGE_DETAILS = 50
    MAX_LINK_DETAILS = 100

    def extract(self, soup: BeautifulSoup, base_url: str, html_size: int) -> FactModel:
        """Build the complete fact model for one page"""
        facts = FactModel(
            meta_tags=self.extract_meta_tags(soup),
            headings=self.extract_headings(soup),
            images=self.extract_images(soup, base_url),
            links=self.extract_links(soup, base_url),
            performance=self.extract_performance(soup, html_size),
            security=self.extract_security(base_url),
            structured_data=self.extract_structured_data(soup),
            content=self.extract_content(soup),
        )
        logger.debug(
            f"Extracted {facts.images.total} images, {facts.links.total} links, "
            f"{facts.content.word_count} words from {base_url}"
        )
        return facts

    def extract_from_html(self, html: str, base_url: str) -> FactModel:
        return self.extract(parse_html(html), base_url, len((html or "").encode('utf-8')))

    def extract_meta_tags(self, soup) -> MetaTagFacts:
        return MetaTagFacts(
            title=self._extract_title(soup),
            description=self._meta_content(soup, 'description'),
            robots=self._meta_content(soup, 'robots'),
            canonical=safe_extract_attribute(soup.find('link', rel='canonical'), 'href'),
            viewport=self._meta_content(soup, 'viewport'),
            og_tags=self._collect_meta(soup, 'property', _OG_PROPERTY_RE),
            twitter_tags=self._collect_meta(soup, 'name', _TWITTER_NAME_RE),
        )

    def extract_headings(self, soup) -> HeadingFacts:
        levels = {
            f'h{n}': tuple(heading.get_text().strip() for heading in soup.find_all(f'h{n}'))
            for n in range(1, 7)
        }
        return HeadingFacts(**levels)

    def extract_images(self, soup, base_url: str) -> ImageFacts:
        with_alt = 0
        without_alt = 0
        details: List[ImageDetail] = []

        for img in soup.find_all('img'):
            src = safe_extract_attribute(img, 'src')
            alt = safe_extract_attribute(img, 'alt')
            has_alt = alt.strip() != ""

            if has_alt:
                with_alt += 1
            else:
                without_alt += 1

            if len(details) < self.MAX_IMAGE_DETAILS:
                details.append(ImageDetail(
                    src=self._resolve_src(src, base_url),
                    alt=alt,
                    has_alt=has_alt,
                ))

        return ImageFacts(
            total=with_alt + without_alt,
            with_alt=with_alt,
            without_alt=without_alt,
            details=tuple(details),
        )

    def extract_links(self, soup, base_url: str) -> LinkFacts:
        base_host = url_hostname(base_url)
        internal = 0
        external = 0
        details: List[LinkDetail] = []

        for anchor in soup.find_all('a', href=True):
            href = safe_extract_attribute(anchor, 'href')
            if not href or href.startswith('javascript:') or href == '#':
                continue

            full_url, is_external = self._classify_link(href, base_url, base_host)
            if is_external:
                external += 1
            else:
                internal += 1

            if len(details) < self.MAX_LINK_DETAILS:
                details.append(LinkDetail(
                    url=full_url,
                    text=anchor.get_text().strip(),
                    is_external=is_external,
                ))

        return LinkFacts(internal=internal, external=external, details=tuple(details))

    def extract_structured_data(self, soup) -> Tuple[Any, ...]:
        blocks = []
        for script in soup.find_all('script', type=JSON_LD_TYPE):
            raw = script.string or "{}"
            try:
                blocks.append(json.loads(raw))
            except ValueError:
                logger.debug("Skipping malformed JSON-LD block")
                continue
        return tuple(blocks)

    def extract_performance(self, soup, html_size: int) -> PerformanceFacts:
        return PerformanceFacts(
            html_size=html_size,
            resource_count=ResourceCount(
                scripts=len(soup.find_all('script')),
                stylesheets=len(soup.find_all('link', rel='stylesheet')),
                images=len(soup.find_all('img')),
                iframes=len(soup.find_all('iframe')),
            ),
        )

    def extract_security(self, base_url: str) -> SecurityFacts:
        return SecurityFacts(https=base_url.startswith('https://'))

    def extract_content(self, soup) -> ContentFacts:
        body_text = self._extract_body_text(soup)
        words = body_text.split()
        return ContentFacts(
            word_count=len(words),
            paragraph_count=len(soup.find_all('p')),
            readability_score=self.calculate_readability(body_text, words),
        )

    @staticmethod
    def calculate_readability(text: str, words: List[str] = None) -> float:
        """
        Simplified readability heuristic, 0-100, higher is easier.

        100 - 2 * (average words per sentence) - 5 * (average word length),
        clamped to [0, 100].
        """
        if words is None:
            words = text.split()

        sentences = [sentence for sentence in _SENTENCE_SPLIT_RE.split(text) if sentence]
        if sentences:
            avg_words_per_sentence = sum(len(s.split()) for s in sentences) / len(sentences)
        else:
            avg_words_per_sentence = 0

        if words:
            avg_word_length = sum(len(word) for word in words) / len(words)
        else:
            avg_word_length = 0

        score = 100 - avg_words_per_sentence * 2 - avg_word_length * 5
        return float(max(0, min(100, score)))

    def _extract_title(self, soup) -> str:
        return safe_extract_text(soup.find('title'))

    def _meta_content(self, soup, name: str) -> str:
        return safe_extract_attribute(soup.find('meta', attrs={'name': name}), 'content')

    def _collect_meta(self, soup, key_attribute: str, pattern) -> Dict[str, str]:
        tags = {}
        for meta in soup.find_all('meta', attrs={key_attribute: pattern}):
            key = safe_extract_attribute(meta, key_attribute)
            content = safe_extract_attribute(meta, 'content')
            if key and content:
                tags[key] = content
        return tags

    def _resolve_src(self, src: str, base_url: str) -> str:
        if not src or has_scheme(src):
            return src
        return resolve_against_origin(src, base_url)

    def _classify_link(self, href: str, base_url: str, base_host: str) -> Tuple[str, bool]:
        if not has_scheme(href) and not href.startswith('//'):
            return resolve_against_origin(href, base_url), False

        absolute = f"https:{href}" if href.startswith('//') else href
        try:
            host = url_hostname(absolute)
        except ValueError:
            # unparsable URLs count as internal
            return absolute, False
        return absolute, host != base_host

    def _extract_body_text(self, soup) -> str:
        if soup.body is not None:
            return collapse_whitespace(soup.body.get_text())

        # html.parser only builds <body> when the markup has one
        root = soup.html or soup
        parts = []
        for child in root.children:
            if isinstance(child, Tag):
                if child.name not in ('head', 'title'):
                    parts.append(child.get_text())
            elif type(child) is NavigableString:
                parts.append(str(child))
        return collapse_whitespace("".join(parts))
