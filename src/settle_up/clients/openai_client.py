"""OpenAI GPT client for natural-language settlement summaries."""

import json
import logging
from typing import Any

from openai import OpenAI

from ..exceptions import OpenAIAPIError

logger = logging.getLogger(__name__)


class SummaryClient:
    """GPT-based writer of group settlement summaries."""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini"):
        """Initialize the client."""
        self.client = OpenAI(api_key=api_key)
        self.model = model

    def write_summary(self, context: dict[str, Any], language: str = "English") -> str:
        """
        Write a short, friendly summary of a group's expenses and settlement.

        Args:
            context: JSON-serializable settlement data (see report.build_report_context)
            language: Language to write the summary in

        Returns:
            Plain-text summary

        Raises:
            OpenAIAPIError: If the model returns no choices or no content
        """
        # System prompt
        system_prompt = f"""You are a witty but professional group-finance assistant. Write in {language}.

Your summary must contain exactly three parts:
1. Spending highlights: briefly comment on the group's spending habits. Name the biggest spender (who paid the most) and the freeloader (involved most often while paying the least). A light, humorous tone is welcome.
2. Settlement overview: one sentence with the total spent and the average per person.
3. Friendly reminder: remind the people who owe money to make their transfers, and end on a fun note.

Output plain text only. Do not use Markdown code blocks."""

        # User prompt
        user_prompt = f"""Summarize this shared-expense settlement.

Data (JSON):
{json.dumps(context, indent=2, ensure_ascii=False, default=str)}"""

        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=0.7,
        )

        if not response.choices:
            raise OpenAIAPIError("OpenAI returned no choices")

        text = (response.choices[0].message.content or "").strip()
        if not text:
            raise OpenAIAPIError("OpenAI returned an empty summary")

        logger.info(f"GPT wrote a {len(text)}-character summary ({self.model})")

        return text
