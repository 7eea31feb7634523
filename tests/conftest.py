"""
Pytest configuration and shared fixtures
"""
import pytest
import os
import requests
import tempfile
from unittest.mock import Mock

# Add project root to path
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fact_extractor import FactExtractor
from models import (
    FactModel, MetaTagFacts, HeadingFacts, ImageFacts, LinkFacts,
    PerformanceFacts, SecurityFacts, ContentFacts,
)
from storage import NullResultSink
from utils import FetchedPage


WELL_FORMED_DESCRIPTION = (
    "A thorough guide to planting, watering and harvesting vegetables in a small "
    "backyard garden through every season of the year."
)


def make_body_text(word_count: int) -> str:
    """Short simple sentences so the readability score stays high"""
    words = ["the", "cat", "sat", "on", "a", "mat"]
    tokens = [words[i % len(words)] for i in range(word_count)]
    sentences = [" ".join(tokens[i:i + 6]) + "." for i in range(0, len(tokens), 6)]
    return " ".join(sentences)


def make_page(title="Growing Vegetables At Home: A Complete Guide", description=WELL_FORMED_DESCRIPTION,
              h1_count=1, images="", word_count=400, og=True, twitter=True, json_ld=True, extra_body=""):
    head = [f"<title>{title}</title>" if title is not None else ""]
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    if og:
        head.append('<meta property="og:title" content="Growing Vegetables">')
    if twitter:
        head.append('<meta name="twitter:card" content="summary">')
    if json_ld:
        head.append('<script type="application/ld+json">{"@type": "Article"}</script>')
    h1s = " ".join(f"<h1>Heading {i}</h1>" for i in range(h1_count))
    return (
        f"<html><head>{''.join(head)}</head>"
        f"<body>{h1s}\n<p>{make_body_text(word_count - 2 * h1_count)}</p>\n{images}{extra_body}</body></html>"
    )


def make_response(body: bytes, status_code=200, content_type="text/html"):
    """A real requests.Response, with encoding taken from the headers as the adapter does"""
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.headers['Content-Type'] = content_type
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    response.url = "https://example.com"
    return response


@pytest.fixture
def extractor():
    return FactExtractor()


@pytest.fixture
def base_facts():
    """Fact model for a page with no issues at all"""
    return FactModel(
        meta_tags=MetaTagFacts(
            title="Growing Vegetables At Home: A Complete Guide",
            description=WELL_FORMED_DESCRIPTION,
            og_tags={"og:title": "Growing Vegetables"},
            twitter_tags={"twitter:card": "summary"},
        ),
        headings=HeadingFacts(h1=("Growing Vegetables",)),
        images=ImageFacts(),
        links=LinkFacts(),
        performance=PerformanceFacts(html_size=2048),
        security=SecurityFacts(https=True),
        structured_data=({"@type": "Article"},),
        content=ContentFacts(word_count=450, paragraph_count=5, readability_score=70.0),
    )


@pytest.fixture
def temp_db():
    """Create a temporary database for testing"""
    with tempfile.NamedTemporaryFile(suffix='.db', delete=False) as f:
        db_path = f.name

    yield db_path

    try:
        os.unlink(db_path)
    except OSError:
        pass


@pytest.fixture
def fake_fetcher():
    """Fetcher returning whatever HTML is assigned to ``fake_fetcher.html``"""
    fetcher = Mock()
    fetcher.html = "<html><head></head><body></body></html>"

    def fetch(url):
        return FetchedPage(url=url, status_code=200, html=fetcher.html,
                           html_size=len(fetcher.html.encode('utf-8')))

    fetcher.fetch.side_effect = fetch
    return fetcher


@pytest.fixture
def null_sink():
    return NullResultSink()
