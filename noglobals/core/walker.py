"""
Walker — Discovers Go files under a root path and runs the global variable rule.

Traversal is depth-first in lexical name order, so the same tree always
yields the same diagnostics in the same order. A parse failure aborts the
whole scan: callers get either every diagnostic or the error, never a mix.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Iterator

from noglobals.config import settings
from noglobals.core.ast_parser import extract_declarations
from noglobals.core.parser import GoParser
from noglobals.core.rules import global_variable
from noglobals.models.rule_models import Diagnostic, ScanResult

logger = logging.getLogger("noglobals.walker")

# `./...` style marker meaning "include all subdirectories"
RECURSIVE_SUFFIX = os.sep + "..."


def split_recursive(root_path: str) -> tuple[str, bool]:
    """Strip a trailing recursive marker. Returns (path, recursive)."""
    if root_path.endswith(RECURSIVE_SUFFIX):
        return root_path[: -len(RECURSIVE_SUFFIX)], True
    return root_path, False


def should_descend(path: str, root: str, recursive: bool) -> bool:
    """The root is always entered; anything below it only when recursive."""
    return recursive or path == root


def should_parse(
    path: str,
    include_tests: bool,
    source_suffix: str = ".go",
    test_suffix: str = "_test.go",
) -> bool:
    if not path.endswith(source_suffix):
        return False
    if not include_tests and path.endswith(test_suffix):
        return False
    return True


class Scanner:
    """
    Walks a directory tree and reports global variables in Go files.

    One GoParser is reused for every file of every scan.
    """

    def __init__(
        self,
        parser: GoParser | None = None,
        source_suffix: str | None = None,
        test_suffix: str | None = None,
    ) -> None:
        self.parser = parser or GoParser()
        self.source_suffix = source_suffix or settings.source_suffix
        self.test_suffix = test_suffix or settings.test_suffix

    def iter_files(self, root: str, recursive: bool, include_tests: bool) -> Iterator[str]:
        """Yield eligible files below root, depth-first in name order.

        Raises OSError if root (or a directory below it) cannot be listed.
        """
        if not os.path.isdir(root):
            if not os.path.exists(root):
                raise FileNotFoundError(f"no such file or directory: {root}")
            if should_parse(root, include_tests, self.source_suffix, self.test_suffix):
                yield root
            return

        yield from self._walk_dir(root, root, recursive, include_tests)

    def _walk_dir(
        self, directory: str, root: str, recursive: bool, include_tests: bool
    ) -> Iterator[str]:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
        for entry in entries:
            # Cleaned the way Go joins paths: "./a.go" is reported as "a.go"
            path = os.path.normpath(os.path.join(directory, entry.name))
            # Symlinked directories are not followed
            if entry.is_dir(follow_symlinks=False):
                if should_descend(path, root, recursive):
                    yield from self._walk_dir(path, root, recursive, include_tests)
                else:
                    logger.debug("Skipping directory %s (not recursive)", path)
                continue
            if should_parse(path, include_tests, self.source_suffix, self.test_suffix):
                yield path

    def check_file(self, path: str) -> list[Diagnostic]:
        """Parse one file and run the rule on it. Raises ParseError / OSError."""
        with open(path, "rb") as f:
            source = f.read()
        tree, source_bytes = self.parser.parse(source, path)
        source_file = extract_declarations(tree, source_bytes, path)
        logger.debug(
            "Parsed %s (package %s): %d var specs",
            path, source_file.package, len(source_file.groups),
        )
        return global_variable.check(source_file)

    def scan(self, root_path: str, include_tests: bool = False) -> ScanResult:
        """
        Scan a root path.

        Args:
            root_path: Directory or file. A trailing `/...` includes
                every subdirectory.
            include_tests: Also scan files ending with the test suffix.

        Returns:
            ScanResult with diagnostics in file, declaration, binding order.

        Raises:
            ParseError: a file is not valid Go. No partial result.
            OSError: the root or a directory below it cannot be read.
        """
        start = time.monotonic()
        root, recursive = split_recursive(root_path)

        diagnostics: list[Diagnostic] = []
        files_scanned = 0
        for path in self.iter_files(root, recursive, include_tests):
            diagnostics.extend(self.check_file(path))
            files_scanned += 1

        elapsed = (time.monotonic() - start) * 1000
        logger.info(
            "Scanned %d files under %s: %d global variables",
            files_scanned, root, len(diagnostics),
        )
        return ScanResult(
            diagnostics=diagnostics,
            files_scanned=files_scanned,
            scan_duration_ms=round(elapsed, 2),
        )


def check_no_globals(root_path: str, include_tests: bool = False) -> list[str]:
    """Scan root_path and return the rendered diagnostic messages."""
    return Scanner().scan(root_path, include_tests).messages
