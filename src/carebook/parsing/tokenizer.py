"""Prefix scanner that splits command arguments into a multimap."""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Prefix:
    """Literal token (ending in ``/``) that introduces one field value."""

    token: str

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True)
class PrefixOccurrence:
    """One prefix hit in the raw argument string."""

    prefix: Prefix
    position: int
    value: str


@dataclass(frozen=True)
class ArgumentMultimap:
    """Preamble plus every prefix value in input order.

    Repeated prefixes keep all of their values so duplicates can be reported
    by the caller.
    """

    preamble: str = ""
    occurrences: tuple[PrefixOccurrence, ...] = field(default=())

    def get_all_values(self, prefix: Prefix) -> list[str]:
        """Return every value supplied for ``prefix`` in input order.

        Args:
            prefix: Prefix to look up.

        Returns:
            Values in input order, empty when absent.
        """
        return [hit.value for hit in self.occurrences if hit.prefix == prefix]

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value supplied for ``prefix``.

        Args:
            prefix: Prefix to look up.

        Returns:
            Last value, or ``None`` when absent.
        """
        values = self.get_all_values(prefix)
        return values[-1] if values else None

    def contains(self, prefix: Prefix) -> bool:
        """Return whether ``prefix`` appears at least once."""
        return any(hit.prefix == prefix for hit in self.occurrences)

    def first_position(self, prefix: Prefix) -> int | None:
        """Return input position of the first occurrence of ``prefix``."""
        for hit in self.occurrences:
            if hit.prefix == prefix:
                return hit.position
        return None

    def count(self, prefix: Prefix) -> int:
        """Return how many times ``prefix`` appears."""
        return sum(1 for hit in self.occurrences if hit.prefix == prefix)


def _prefix_pattern(prefixes: tuple[Prefix, ...]) -> re.Pattern[str]:
    # Longest first so overlapping tokens resolve to the most specific prefix.
    ordered = sorted({p.token for p in prefixes}, key=len, reverse=True)
    alternatives = "|".join(re.escape(token) for token in ordered)
    return re.compile(rf"(?<!\S)(?:{alternatives})")


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Split ``args`` into a preamble and prefix values.

    A prefix is only recognized at the start of the string or right after
    whitespace. Values run until the next recognized prefix and are trimmed.

    Args:
        args: Raw argument string (everything after the command word).
        *prefixes: Prefixes recognized for this command.

    Returns:
        Argument multimap; never raises.
    """
    if not prefixes:
        return ArgumentMultimap(preamble=args.strip())

    by_token = {p.token: p for p in prefixes}
    matches = list(_prefix_pattern(prefixes).finditer(args))
    if not matches:
        return ArgumentMultimap(preamble=args.strip())

    preamble = args[: matches[0].start()].strip()
    occurrences: list[PrefixOccurrence] = []
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(args)
        occurrences.append(
            PrefixOccurrence(
                prefix=by_token[match.group(0)],
                position=match.start(),
                value=args[match.end() : end].strip(),
            )
        )
    return ArgumentMultimap(preamble=preamble, occurrences=tuple(occurrences))
