"""Parse and render blocks of SecRule directives.

Directives are independent of each other, so they may be parsed on a thread
pool. Results always come back in source order. Whether one bad directive
should stop the whole block is up to the caller: parse_rules() stops at the
first error, validate_rules() collects all of them.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor

from .errors import DirectiveError, SecRuleError
from .rule import SecRule

logger = logging.getLogger(__name__)


def _env_workers(value: str | None) -> int:
    """Worker count from an environment value; anything but an integer is 0."""
    try:
        return max(int(value or 0), 0)
    except ValueError:
        logger.warning("Ignoring invalid SECRULES_MAX_WORKERS=%r", value)
        return 0


# Configuration from environment (unset, 0 or invalid parses serially)
MAX_WORKERS = _env_workers(os.environ.get("SECRULES_MAX_WORKERS"))


def iter_directives(text: str):
    """Yield (line_num, directive_text) for each directive in ``text``.

    Blank lines and ``#`` comments are skipped. A line ending in a backslash
    continues on the next line; line_num is where the directive starts.
    """
    pending: list[str] = []
    start = 0

    # Only "\n" ends a line; other line boundaries may sit inside arguments
    for line_num, line in enumerate(text.split("\n"), start=1):
        stripped = line.rstrip("\r").strip(" \t")
        if not pending:
            if not stripped or stripped.startswith("#"):
                continue
            start = line_num
        if stripped.endswith("\\"):
            pending.append(stripped[:-1])
            continue
        pending.append(stripped)
        yield start, "".join(pending)
        pending = []

    # Dangling continuation at end of input
    if pending:
        yield start, "".join(pending)


def _map(func, items, max_workers: int | None) -> list:
    """Apply func to items, on a thread pool if max_workers > 1, keeping order."""
    if max_workers is None:
        max_workers = MAX_WORKERS
    if max_workers <= 1:
        return [func(item) for item in items]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(func, items))


def _parse_directive(directive: tuple[int, str]) -> SecRule:
    line_num, text = directive
    try:
        return SecRule.parse(text)
    except SecRuleError as e:
        raise DirectiveError(line_num, text, e) from e


def _check_directive(directive: tuple[int, str]) -> tuple[int, str, str] | None:
    line_num, text = directive
    try:
        SecRule.parse(text)
    except SecRuleError as e:
        logger.debug("Invalid directive on line %d: %s", line_num, e)
        return (line_num, text, str(e))
    return None


def parse_rules(text: str, max_workers: int | None = None) -> list[SecRule]:
    """Parse every directive in ``text``.

    Args:
        text: Rule text, one directive per (possibly continued) line.
        max_workers: Thread pool size. Defaults to SECRULES_MAX_WORKERS.

    Raises:
        DirectiveError: for the first invalid directive in source order.
    """
    return _map(_parse_directive, list(iter_directives(text)), max_workers)


def validate_rules(
    text: str,
    max_workers: int | None = None,
) -> list[tuple[int, str, str]]:
    """Validate every directive and return errors for the invalid ones.

    Returns:
        List of (line_num, directive_text, error_message) tuples. Empty list
        if all directives are valid.
    """
    results = _map(_check_directive, list(iter_directives(text)), max_workers)
    return [result for result in results if result is not None]


def dump_rules(rules, out) -> None:
    """Write each rule's canonical text on its own line to ``out``."""
    for rule in rules:
        rule.serialize(out)
        out.write("\n")
