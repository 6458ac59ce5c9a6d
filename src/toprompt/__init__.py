"""toprompt - collect selected files into a single LLM prompt."""

__version__ = "1.0.3"
