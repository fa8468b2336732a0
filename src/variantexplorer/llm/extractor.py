"""LLM-backed extraction of HGVS notation from free text."""

import logging
import re

from litellm import acompletion

from variantexplorer.errors import MalformedVariantError
from variantexplorer.llm.prompts import create_extraction_prompt

logger = logging.getLogger(__name__)

FENCE_TAG_PATTERN = re.compile(r"^[A-Za-z]+\n")


def clean_completion(content: str) -> str:
    """Strip code fences, quotes and surrounding whitespace from a model answer."""
    text = content.strip()
    if text.startswith("```"):
        parts = text.split("```")
        text = parts[1] if len(parts) > 1 else parts[0]
        # Language tag on the opening fence, e.g. ```text
        text = FENCE_TAG_PATTERN.sub("", text, count=1)

    lines = text.strip().splitlines()
    if not lines:
        return ""
    return lines[0].strip().strip("`\"'").strip()


class HGVSExtractor:
    """Asks an LLM to rewrite a free-text query as HGVS notation."""

    def __init__(self, model: str = "gpt-4o-mini", temperature: float = 0.0):
        self.model = model
        self.temperature = temperature

    async def extract(self, query: str) -> str:
        """Return the notation the model extracted from ``query``.

        Raises:
            MalformedVariantError: The model call failed or returned nothing
        """
        try:
            response = await acompletion(
                model=self.model,
                messages=create_extraction_prompt(query),
                temperature=self.temperature,
                max_tokens=100,
            )
            content = response.choices[0].message.content or ""
        except Exception as e:
            logger.error(f"HGVS extraction failed for {query!r}: {e}")
            raise MalformedVariantError(f"Failed to extract HGVS notation from query: {e}") from e

        notation = clean_completion(content)
        if not notation:
            raise MalformedVariantError("Failed to extract HGVS notation from query")

        logger.info(f"LLM extracted {notation!r} from {query!r}")
        return notation
