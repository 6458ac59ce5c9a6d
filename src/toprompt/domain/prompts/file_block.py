"""File block template for the collected prompt"""

from toprompt.domain.models.outcome import CollectedEntry

FILE_BLOCK_TEMPLATE = "### File: {path}\n```{extension}\n{content}\n```\n"


def file_extension(path: str) -> str:
    """Get the fence tag for a path

    Args:
        path: File path

    Returns:
        Text after the last dot, or "" if there is no dot or it ends the path
    """
    last_index = path.rfind(".")
    if last_index != -1 and last_index != len(path) - 1:
        return path[last_index + 1 :]
    return ""


def format_file_block(path: str, content: str) -> str:
    """Render one file as a header line followed by a fenced code block"""
    return FILE_BLOCK_TEMPLATE.format(path=path, extension=file_extension(path), content=content)


def build_collected_entry(path: str, content: str) -> CollectedEntry:
    """Create a CollectedEntry with its rendered block"""
    return CollectedEntry(
        path=path,
        extension=file_extension(path),
        content=content,
        block=format_file_block(path, content),
    )
