"""Parser for the platform's reply to an answer submission."""

import re

from bs4 import BeautifulSoup

from domain.models import SubmissionResult

ACCEPTED_MARKER = "That's the right answer"


class AnswerReplyParser:
    """Reads the message article from a submission reply page."""

    def parse(self, html: str) -> SubmissionResult:
        soup = BeautifulSoup(html, "lxml")
        container = soup.select_one("main article") or soup.find("article") or soup.body
        text = container.get_text(" ", strip=True) if container else html.strip()
        message = re.sub(r"\s+", " ", text)
        return SubmissionResult(accepted=ACCEPTED_MARKER in message, raw_message=message)
