from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Implementations decide whether a directory entry takes part in traversal. The
    traversal calls `exclude` once per entry with the entry's path relative to the
    traversal root; an excluded directory is never descended into, so its whole
    subtree disappears from both the rendered tree and the collected file list.

    Example:
        >>> from dirclip.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(["build"])
        >>> rules.exclude("build")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The file or directory path to check, relative to the root of
                the directory being processed, using "/" as separator.

        Returns:
            bool: True if the path should be excluded, False if it should be included.

        Example:
            >>> class TmpExclusionRules(BaseExclusionRules):
            ...     def exclude(self, path: str) -> bool:
            ...         return path.endswith('.tmp')
            >>> rules = TmpExclusionRules()
            >>> rules.exclude("build/temp.tmp")
            True
            >>> rules.exclude("main.py")
            False
        """
        pass
