"""Unit tests for puzzle description extraction."""

import pytest

from domain.exceptions import ExtractionError
from infrastructure.parsers import DescriptionParser

PAGE = """
<html><body><main>
<article class="day-desc"><h2>--- Day 1: Trebuchet?! ---</h2>
<p>Something is wrong with <em>global snow production</em>.</p>
<p>For example:</p>
<pre><code>1abc2
pqr3stu8vwx
</code></pre>
<ul><li>First <code>12</code></li><li>Then <a href="/2023/about">about</a></li></ul>
</article>
<p>Your puzzle answer was <code>54239</code>.</p>
<article class="day-desc"><h2 id="part2">--- Part Two ---</h2>
<p>Some digits are <em>spelled out</em>.</p>
</article>
</main></body></html>
"""


@pytest.fixture
def parser():
    return DescriptionParser()


def test_extracts_markdown_from_articles(parser):
    markdown = parser.extract(PAGE)

    assert markdown.startswith("## --- Day 1: Trebuchet?! ---")
    assert "Something is wrong with *global snow production*." in markdown
    assert "```\n1abc2\npqr3stu8vwx\n```" in markdown
    assert "- First `12`" in markdown
    assert "- Then [about](/2023/about)" in markdown
    assert "## --- Part Two ---" in markdown


def test_ignores_text_outside_articles(parser):
    assert "54239" not in parser.extract(PAGE)


def test_missing_article_raises(parser):
    with pytest.raises(ExtractionError):
        parser.extract("<html><body><main><p>Please log in.</p></main></body></html>")


def test_empty_page_raises(parser):
    with pytest.raises(ExtractionError):
        parser.extract("")
