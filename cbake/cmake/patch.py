"""
In-place update of a single declaration inside an existing CMakeLists.txt.

This is a textual heuristic rather than a parser. The first occurrence of the
keyword is taken to be the declaration, and the declaration ends at the first
closing parenthesis after it. A hand-edited file that mentions the keyword
earlier (for example in a comment) or nests parentheses inside the
declaration will be patched at the wrong span.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from . import generator

logger = logging.getLogger(__name__)

ADD_EXECUTABLE = "add_executable"


def reconcile(document: str, keyword: str, fragment: str) -> Tuple[str, bool]:
    """
    Replace the declaration starting at ``keyword`` or append ``fragment``.

    Args:
        document: Existing CMakeLists.txt text
        keyword: Command name that opens the declaration
        fragment: Freshly generated declaration text

    Returns:
        Tuple of (updated text, True if an existing declaration was replaced)
    """
    start = document.find(keyword)
    if start != -1:
        close = document.find(")", start)
        if close != -1:
            logger.debug(f"Replacing {keyword} declaration at {start}..{close + 1}")
            updated = document[:start] + fragment.strip() + document[close + 1 :]
            return updated, True

    logger.debug(f"No {keyword} declaration found, appending")
    return document + fragment, False


@dataclass(frozen=True)
class PatchTarget:
    """One declaration to reconcile inside a document."""

    keyword: str
    replacement: str

    def apply(self, document: str) -> Tuple[str, bool]:
        return reconcile(document, self.keyword, self.replacement)


def sync_executable_sources(document: str, sources: Sequence[str]) -> Tuple[str, bool]:
    """Point the ``add_executable`` declaration at ``sources``."""
    target = PatchTarget(ADD_EXECUTABLE, generator.add_executable(sources))
    return target.apply(document)
