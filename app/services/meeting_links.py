from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from app.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class MeetingLinkPool:
    """Immutable set of pre-provisioned meeting URLs handed out on approval.

    Selection is uniform-random with replacement; the same link may be given
    to several sessions.
    """

    def __init__(self, links: Iterable[str]):
        self._links: Tuple[str, ...] = tuple(links)
        if not self._links:
            raise ConfigurationError("Meeting link pool is empty")

    @property
    def links(self) -> Tuple[str, ...]:
        return self._links

    def __len__(self) -> int:
        return len(self._links)

    def __contains__(self, link: object) -> bool:
        return link in self._links

    def pick(self, rng: Optional[random.Random] = None) -> str:
        return (rng or random).choice(self._links)


def parse_meeting_links(text: str, prefix: str) -> Tuple[str, ...]:
    lines = (line.strip() for line in text.splitlines())
    return tuple(line for line in lines if line.startswith(prefix))


def load_meeting_links(path: Union[str, Path], prefix: str) -> MeetingLinkPool:
    """Read a newline-delimited link file once and build the pool."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read meeting links file '{path}': {exc}") from exc

    links = parse_meeting_links(text, prefix)
    if not links:
        raise ConfigurationError(f"No meeting links starting with '{prefix}' in '{path}'")

    logger.info("Loaded %d meeting links from %s", len(links), path)
    return MeetingLinkPool(links)
