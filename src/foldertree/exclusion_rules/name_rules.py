"""Exclusion rules that skip directory entries by name using .gitignore pattern syntax."""

from typing import Iterable, Optional

from pathspec import GitIgnoreSpec

from .base_rules import BaseExclusionRules

# Hidden entries and the dependency/build directories of npm and cargo projects
DEFAULT_EXCLUDED_PATTERNS = (".*", "node_modules", "target")


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules matching entry names against .gitignore-style patterns.

    The patterns are compiled with the pathspec library, so they follow Git's wildmatch
    semantics. Because only bare entry names are matched, a pattern applies to an entry
    at any depth of the tree: ``node_modules`` skips every directory called
    ``node_modules``, and ``.*`` skips every entry whose name starts with a dot.

    When no patterns are given, DEFAULT_EXCLUDED_PATTERNS is used. Pass an empty
    sequence to get rules that exclude nothing.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = NameExclusionRules()
        >>> rules.exclude(".git")
        True
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("target")
        True
        >>> rules.exclude("targets")
        False
        >>> rules.exclude("main.rs")
        False
        >>> NameExclusionRules([]).exclude(".env")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        """Initialize NameExclusionRules with a set of name patterns.

        Args:
            patterns: Patterns to exclude. Defaults to DEFAULT_EXCLUDED_PATTERNS.
        """
        if patterns is None:
            patterns = DEFAULT_EXCLUDED_PATTERNS
        self.patterns = list(patterns)
        self.spec = GitIgnoreSpec.from_lines(self.patterns)

    def exclude(self, name: str) -> bool:
        """Check if an entry name matches any of the loaded patterns.

        Args:
            name: The entry name to check.

        Returns:
            bool: True if the name matches a non-negated pattern that isn't overridden
                by a later negated one, False otherwise.

        Example:
            >>> rules = NameExclusionRules([".*", "!.env.example"])
            >>> rules.exclude(".env")
            True
            >>> rules.exclude(".env.example")
            False
        """
        return self.spec.match_file(name)

    def add_rule(self, rule: str) -> None:
        """Add a single pattern to the existing rules.

        Args:
            rule: A .gitignore-style pattern (e.g. "dist", "*.pyc", "!keep.pyc").

        Example:
            >>> rules = NameExclusionRules()
            >>> rules.exclude("dist")
            False
            >>> rules.add_rule("dist")
            >>> rules.exclude("dist")
            True
        """
        self.patterns.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self.patterns)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.patterns!r})"
