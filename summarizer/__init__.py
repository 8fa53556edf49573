"""Meeting Summarizer: transcript summaries with multi-provider LLM fallback."""

__version__ = "1.0.0"
