"""Prompt templates.

Examples:
    >>> from summarizer.prompts import summary
    >>> system_prompt, user_prompt = summary.build_prompts(request)
"""

from summarizer.prompts import summary

__all__ = ["summary"]
