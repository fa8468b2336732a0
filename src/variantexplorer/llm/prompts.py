# variantexplorer/llm/prompts.py
"""
Prompts for turning free-text variant descriptions into HGVS notation.
The model only rewrites notation; resolution happens downstream.
"""

EXTRACTION_SYSTEM_PROMPT = """You are a specialized assistant that extracts HGVS notations from text.
Return ONLY the HGVS notation (or rsID) without any explanation or additional text.
Prefer one of these forms:
- NC_000017.11:g.43124027_43124028del
- NM_007294.4:c.68_69del
- BRCA1 c.68_69delAG
- rs80357713"""

EXTRACTION_USER_PROMPT = 'Convert the following to HGVS notation: "{query}"'


def create_extraction_prompt(query: str) -> list[dict]:
    """
    Build the chat messages for HGVS extraction.

    Args:
        query: Free-text variant description

    Returns:
        List of message dicts for the LLM
    """
    return [
        {"role": "system", "content": EXTRACTION_SYSTEM_PROMPT},
        {"role": "user", "content": EXTRACTION_USER_PROMPT.format(query=query)},
    ]
