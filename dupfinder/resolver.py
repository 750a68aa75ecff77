"""
Interactive resolution of duplicate sets ("fix mode").

Per set, a small state machine:

    Prompt --invalid_input / invalid_index--> Prompt
    Prompt --0--> Abstain (nothing deleted)
    Prompt --i in [1, n]--> Keep(i - 1) (every other path deleted)

Parsing is a pure function (``parse_selection``); the terminal I/O goes
through injectable streams so the loop runs on ``io.StringIO`` in tests.
"""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

import structlog

from dupfinder.deleter import DeletionResult, FileDeleter
from dupfinder.models import FileRecord, Selection, SelectionKind

logger = structlog.get_logger(__name__)

PROMPT = "Select one to keep (0 to keep all): "

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

_RETRY_MESSAGES = {
    SelectionKind.invalid_input: "Invalid input.",
    SelectionKind.invalid_index: "Invalid index.",
}


def parse_selection(text: str, path_count: int) -> Selection:
    """
    Parse one prompt answer.

    Args:
        text: Raw line typed by the user (surrounding whitespace ignored)
        path_count: Number of paths in the set

    Returns:
        Selection: abstain for 0, keep(value - 1) for 1..path_count,
        invalid_index above path_count, invalid_input otherwise
    """
    candidate = text.strip()
    if not _UNSIGNED_RE.fullmatch(candidate):
        return Selection(kind=SelectionKind.invalid_input)

    value = int(candidate)
    if value == 0:
        return Selection.abstain()
    if value <= path_count:
        return Selection.keep(value - 1)
    # Any well-formed number above path_count, however large, is an index error.
    return Selection(kind=SelectionKind.invalid_index)


class Resolver:
    """Ask which copy to keep, then delete the others."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        deleter: Optional[FileDeleter] = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.deleter = deleter or FileDeleter(stdout=self.stdout, stderr=self.stderr)

    def prompt(self, record: FileRecord) -> Selection:
        """
        Prompt until the answer is terminal.

        End of input counts as abstain: nothing is deleted.
        """
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                print(file=self.stdout)
                logger.warning("dupfinder_prompt_input_closed", paths=len(record.paths))
                return Selection.abstain()

            selection = parse_selection(line, len(record.paths))
            if selection.is_terminal:
                return selection

            print(_RETRY_MESSAGES[selection.kind], file=self.stdout)

    def resolve(self, record: FileRecord) -> DeletionResult:
        """
        Resolve one duplicate set.

        Returns:
            DeletionResult (empty when the user keeps all copies)
        """
        selection = self.prompt(record)
        if selection.kind is SelectionKind.abstain:
            logger.info("dupfinder_set_kept", paths=len(record.paths))
            return DeletionResult()

        result = self.deleter.delete_except(record, selection.index)
        logger.info(
            "dupfinder_set_resolved",
            kept=str(record.paths[selection.index]),
            deleted=result.deleted,
            errors=result.errors,
        )
        return result
