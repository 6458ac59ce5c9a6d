"""Availability of the copy-as-prompt action"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

logger = logging.getLogger(__name__)


def is_action_available(
    project_base: Optional[Union[str, Path]],
    selection: Optional[Sequence[object]],
) -> bool:
    """Check whether the action should be offered for a selection

    Args:
        project_base: Project base directory (None when no project is open)
        selection: Selected entries

    Returns:
        True if there is a project and at least one selected entry
    """
    if project_base is None:
        logger.debug("Hiding action: no project")
        return False
    available = bool(selection)
    logger.debug(f"Action available: {available}")
    return available
