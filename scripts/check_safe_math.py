#!/usr/bin/env python3
"""Safe math linting script for the split router.

Every quantity in the solver is an integer: token amounts, liquidity and
Q64.96 prices. This script scans the package for patterns that would bring
floating point or inexact rationals into that arithmetic. It should be run as
part of CI to prevent regressions.

Usage:
    python scripts/check_safe_math.py [--verbose]

Exit codes:
    0 - No issues found
    1 - Issues found (with details printed)
"""

import argparse
import logging
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import structlog

logger = structlog.get_logger()

# Directories to scan
SCAN_DIRS = ["splitroute"]

# Files/directories to completely skip
SKIP_PATHS = ["__pycache__"]

TRUE_DIVISION = re.compile(r"(\w+|\))\s*/(?![/=])\s*(\w+|\()")
FLOAT_LITERAL = re.compile(r"(?<![\w.])\d+\.\d*(?:[eE][-+]?\d+)?(?!\w)|(?<![\w.])\d+[eE][-+]?\d+(?!\w)")
FLOAT_CALL = re.compile(r"\bfloat\s*\(")
INEXACT_IMPORT = re.compile(r"^\s*(?:from|import)\s+(decimal|fractions|math|numpy|scipy)\b")


@dataclass
class Issue:
    """A detected unsafe math pattern."""

    file: Path
    line_num: int
    line: str
    pattern: str
    message: str


def should_skip_file(path: Path) -> bool:
    """Check if file should be completely skipped."""
    path_str = str(path)
    return any(skip in path_str for skip in SKIP_PATHS)


class DocstringTracker:
    """Track docstring state across multiple lines."""

    def __init__(self) -> None:
        self.in_docstring = False
        self.docstring_char: str | None = None

    def process_line(self, line: str) -> str:
        """Blank out docstrings, string literals and comments in ``line``."""
        result = []
        i = 0
        while i < len(line):
            if line[i : i + 3] in ('"""', "'''"):
                if not self.in_docstring:
                    self.in_docstring = True
                    self.docstring_char = line[i : i + 3]
                    result.append("   ")
                    i += 3
                    continue
                if line[i : i + 3] == self.docstring_char:
                    self.in_docstring = False
                    self.docstring_char = None
                    result.append("   ")
                    i += 3
                    continue

            if self.in_docstring:
                result.append(" ")
                i += 1
                continue

            char = line[i]
            if char == "#":
                break

            if char in ('"', "'"):
                quote_char = char
                result.append(" ")
                i += 1
                while i < len(line):
                    if line[i] == quote_char and line[i - 1] != "\\":
                        result.append(" ")
                        i += 1
                        break
                    result.append(" ")
                    i += 1
                continue

            result.append(char)
            i += 1

        return "".join(result)


def scan_lines(path: Path, lines: list[str]) -> Iterator[Issue]:
    """Yield every unsafe pattern in ``lines``, ignoring strings and comments."""
    tracker = DocstringTracker()
    for i, original_line in enumerate(lines, 1):
        inexact = INEXACT_IMPORT.match(original_line)
        code = tracker.process_line(original_line)
        if not code.strip():
            continue

        if inexact:
            yield Issue(
                file=path,
                line_num=i,
                line=original_line.rstrip(),
                pattern="inexact import",
                message=f"{inexact.group(1)} brings non-integer arithmetic into the solver",
            )
            continue

        if TRUE_DIVISION.search(code.replace("//", "  ")):
            yield Issue(
                file=path,
                line_num=i,
                line=original_line.rstrip(),
                pattern="true division",
                message="'/' produces a float; use // or mul_div",
            )
        if FLOAT_CALL.search(code):
            yield Issue(
                file=path,
                line_num=i,
                line=original_line.rstrip(),
                pattern="float conversion",
                message="float() on solver values loses precision",
            )
        if FLOAT_LITERAL.search(code):
            yield Issue(
                file=path,
                line_num=i,
                line=original_line.rstrip(),
                pattern="float literal",
                message="float literal in integer arithmetic",
            )


def scan_file(path: Path) -> list[Issue]:
    """Scan a single file for unsafe math patterns."""
    if should_skip_file(path):
        return []
    return list(scan_lines(path, path.read_text().split("\n")))


def scan_tree(base_dir: Path) -> list[Issue]:
    """Scan every package directory under ``base_dir``."""
    issues: list[Issue] = []
    for scan_dir in SCAN_DIRS:
        dir_path = base_dir / scan_dir
        if not dir_path.exists():
            logger.warning("scan_dir_not_found", path=str(dir_path))
            continue
        for py_file in sorted(dir_path.rglob("*.py")):
            issues.extend(scan_file(py_file))
    return issues


def print_report(issues: list[Issue], verbose: bool) -> None:
    """Print the audit report."""
    if not issues:
        print("No unsafe math patterns found")
        return

    print(f"\n{'=' * 70}")
    print(f"SAFE MATH AUDIT RESULTS: {len(issues)} issue(s)")
    print(f"{'=' * 70}\n")
    for issue in issues:
        print(f"  {issue.file}:{issue.line_num}")
        print(f"    {issue.pattern}: {issue.message}")
        if verbose:
            print(f"    > {issue.line.strip()[:70]}")
        print()


def main() -> int:
    parser = argparse.ArgumentParser(description="Safe math linter for the split router")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    base_dir = Path(__file__).parent.parent
    issues = scan_tree(base_dir)
    logger.info("safe_math_scan_complete", issue_count=len(issues))
    print_report(issues, args.verbose)
    return 1 if issues else 0


if __name__ == "__main__":
    sys.exit(main())
