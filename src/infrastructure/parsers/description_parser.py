"""Parser for extracting puzzle descriptions from HTML pages."""

import re

from bs4 import BeautifulSoup, NavigableString, Tag
from loguru import logger

from domain.exceptions import ExtractionError

from .interfaces import DescriptionExtractorProtocol

DESCRIPTION_SELECTOR = "article.day-desc"


class DescriptionParser(DescriptionExtractorProtocol):
    """Converts the puzzle articles of a day page into Markdown."""

    def extract(self, html: str) -> str:
        """
        Extract every puzzle article from a day page.

        Args:
            html: Full HTML of the puzzle page

        Returns:
            Markdown rendering of the description (both parts once unlocked)

        Raises:
            ExtractionError: If the page holds no description article
        """
        soup = BeautifulSoup(html, "lxml")
        articles = soup.select(DESCRIPTION_SELECTOR)
        if not articles:
            raise ExtractionError(f"No '{DESCRIPTION_SELECTOR}' element found in page")

        logger.debug(f"Found {len(articles)} description article(s)")
        markdown = "\n\n".join(self._convert_block(article) for article in articles)
        return self._clean(markdown)

    def _convert_block(self, element: Tag) -> str:
        """Render block-level children of ``element``."""
        blocks = []
        for child in element.children:
            if isinstance(child, NavigableString):
                text = str(child).strip()
                if text:
                    blocks.append(text)
                continue
            if not isinstance(child, Tag):
                continue

            if child.name in ("h1", "h2", "h3", "h4"):
                level = int(child.name[1])
                blocks.append(f"{'#' * level} {self._convert_inline(child).strip()}")
            elif child.name == "p":
                blocks.append(self._convert_inline(child).strip())
            elif child.name == "pre":
                code = child.get_text().rstrip("\n")
                blocks.append(f"```\n{code}\n```")
            elif child.name in ("ul", "ol"):
                blocks.append(self._convert_list(child))
            elif child.name in ("article", "div", "section"):
                blocks.append(self._convert_block(child))
            else:
                blocks.append(self._convert_inline(child).strip())

        return "\n\n".join(block for block in blocks if block)

    def _convert_list(self, element: Tag) -> str:
        ordered = element.name == "ol"
        lines = []
        for index, item in enumerate(element.find_all("li", recursive=False), start=1):
            marker = f"{index}." if ordered else "-"
            lines.append(f"{marker} {self._convert_inline(item).strip()}")
        return "\n".join(lines)

    def _convert_inline(self, element: Tag) -> str:
        parts = []
        for child in element.children:
            if isinstance(child, NavigableString):
                parts.append(re.sub(r"\s+", " ", str(child)))
                continue
            if not isinstance(child, Tag):
                continue

            inner = self._convert_inline(child)
            if child.name == "code":
                parts.append(f"`{child.get_text()}`")
            elif child.name == "em":
                parts.append(f"*{inner}*")
            elif child.name in ("strong", "b"):
                parts.append(f"**{inner}**")
            elif child.name == "a" and child.get("href"):
                parts.append(f"[{inner}]({child['href']})")
            elif child.name == "br":
                parts.append("  \n")
            elif child.name in ("ul", "ol"):
                parts.append("\n" + self._convert_list(child) + "\n")
            else:
                parts.append(inner)

        return "".join(parts)

    def _clean(self, text: str) -> str:
        text = re.sub(r"\n{3,}", "\n\n", text)
        return text.strip() + "\n"
