from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for directory-entry exclusion rules.

    The tree builder consults an exclusion rules object for every entry it finds while
    listing a directory. Entries for which exclude() returns True contribute no node and
    are never descended into. Implementations decide on the entry name alone, so the
    same rules apply at every depth of the tree.

    Example:
        >>> class NoLogs(BaseExclusionRules):
        ...     def exclude(self, name: str) -> bool:
        ...         return name.endswith('.log')
        >>> rules = NoLogs()
        >>> rules.exclude("build.log")
        True
        >>> rules.exclude("main.py")
        False
        >>> rules.add_rule("*.tmp")
        Traceback (most recent call last):
            ...
        NotImplementedError: NoLogs doesn't support adding individual rules.
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if a directory entry should be left out of the tree.

        Args:
            name (str): The entry's final path component (no directory part).

        Returns:
            bool: True if the entry should be excluded, False if it should be included.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that support programmatic rule addition override this method. The
        default implementation raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
