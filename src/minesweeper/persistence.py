"""
Snapshot persistence for Minesweeper sessions.

The front end saves the session as JSON when it exits and restores it
on the next launch. A missing or unreadable file yields a default
session rather than an error.
"""
import json
import logging
from pathlib import Path
from typing import Union

from .session import Session


logger = logging.getLogger(__name__)

DEFAULT_SAVE_PATH = Path.home() / ".minesweeper" / "session.json"

PathLike = Union[str, Path]


def save_session(path: PathLike, session: Session) -> None:
    """Write the session snapshot, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(session.to_dict(), f, indent=2)
    logger.debug("Saved session to %s", path)


def load_session(path: PathLike) -> Session:
    """
    Read a session snapshot.

    Returns:
        The restored session, or a default one if the file is missing
        or is not valid JSON.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No session at %s, starting fresh", path)
        return Session()

    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Could not read session from %s (%s), starting fresh", path, e)
        return Session()

    return Session.from_dict(data)
