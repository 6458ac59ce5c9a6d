"""Prompt templates for collected files"""

from toprompt.domain.prompts.file_block import build_collected_entry, file_extension, format_file_block

__all__ = ["build_collected_entry", "file_extension", "format_file_block"]
