"""Load the list of repositories to check."""

import json
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import ConfigNotFoundError, ConfigParseError
from ..models import RepositoryList, RepositoryListEntry
from ..utils import get_logger

logger = get_logger(__name__)


def load_repository_list(path: str | Path) -> list[RepositoryListEntry]:
    """Read repositories from a JSON file.

    The file must hold an object with a ``repositories`` array whose items
    carry at least a ``url``. Entries are returned in file order,
    without deduplication or URL validation.

    Args:
    ----
        path: Path to the JSON file

    Returns:
    -------
        Ordered list of repository entries

    Raises:
    ------
        ConfigNotFoundError: If the file does not exist
        ConfigParseError: If the file cannot be read, is not valid JSON or has the wrong shape

    """
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFoundError(str(path))

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        msg = f"Cannot read JSON from {path}: {e}"
        raise ConfigParseError(msg) from e

    try:
        repository_list = RepositoryList.model_validate(data)
    except ValidationError as e:
        msg = f"{path} must hold an object with a 'repositories' list of entries that each have a 'url' ({e.error_count()} error(s))"
        raise ConfigParseError(msg) from e

    logger.info("Loaded %d repositories from %s", len(repository_list.repositories), path)
    return repository_list.repositories
