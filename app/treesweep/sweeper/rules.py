"""Classification rules for unwanted project artifacts.

This module defines the rule tables that decide which files and
directories in a project tree are build output, editor debris or
operating-system clutter, and the classifier that applies them.
Matching is purely name based; file contents are never inspected.
"""

from dataclasses import dataclass
from pathlib import Path

# Extensions of temporary, backup and compiled files (compared lowercase).
UNWANTED_EXTENSIONS: frozenset[str] = frozenset(
    {
        # Temporary and backup
        ".tmp",
        ".bak",
        ".old",
        ".orig",
        # Editor swap files
        ".swp",
        ".swo",
        # Logs and caches
        ".log",
        ".cache",
        # Patch leftovers
        ".rej",
        ".patch",
        ".diff",
        # Compiled objects and bytecode
        ".pyc",
        ".pyo",
        ".class",
        ".o",
        ".obj",
        # Binary backups
        ".exe.bak",
        ".dll.bak",
        ".so.bak",
    }
)

# Directory basenames removed as a whole (compared lowercase).
UNWANTED_DIRECTORY_NAMES: frozenset[str] = frozenset(
    {
        # Build output
        "build",
        "debug",
        "release",
        "bin",
        "obj",
        "out",
        "dist",
        "cmake-build-debug",
        "cmake-build-release",
        "cmake-build-relwithdebinfo",
        "cmake-build-minsizerel",
        # IDE state
        ".vs",
        ".idea",
        # Python caches
        "__pycache__",
        ".pytest_cache",
        # Dependencies
        "node_modules",
        # Foreign VCS metadata
        ".svn",
        ".hg",
    }
)

# Literal whole-filename suffixes (case-sensitive).
UNWANTED_SUFFIX_PATTERNS: frozenset[str] = frozenset({"~", ".tmp", ".swp", ".swo"})

# Operating-system clutter (compared lowercase).
UNWANTED_SYSTEM_FILES: frozenset[str] = frozenset({".ds_store", "thumbs.db", "desktop.ini"})

# Exact filenames (case-sensitive).
UNWANTED_EXACT_NAMES: frozenset[str] = frozenset({".gitignore.bak"})


@dataclass(frozen=True, slots=True)
class ClassificationRules:
    """Immutable set of rules deciding what a sweep removes.

    Extension and suffix rules are independent: extensions
    compare the lowercased final suffix of the name, suffix patterns
    compare the end of the full name verbatim (so ``~`` matches
    ``notes.txt~``).

    Attributes:
        extensions: Lowercase extensions, matched case-insensitively.
        directory_names: Lowercase directory basenames, matched case-insensitively.
        suffix_patterns: Literal filename suffixes, matched case-sensitively.
        system_files: Lowercase filenames, matched case-insensitively.
        exact_names: Filenames matched exactly (case-sensitive).
    """

    extensions: frozenset[str] = UNWANTED_EXTENSIONS
    directory_names: frozenset[str] = UNWANTED_DIRECTORY_NAMES
    suffix_patterns: frozenset[str] = UNWANTED_SUFFIX_PATTERNS
    system_files: frozenset[str] = UNWANTED_SYSTEM_FILES
    exact_names: frozenset[str] = UNWANTED_EXACT_NAMES

    def __post_init__(self) -> None:
        """Validate rule tables after initialization."""
        for name in ("extensions", "directory_names", "system_files"):
            values: frozenset[str] = getattr(self, name)
            not_lower = sorted(v for v in values if v != v.lower())
            if not_lower:
                msg = f"{name} must be lowercase, got {', '.join(not_lower)}"
                raise ValueError(msg)
        if "" in self.suffix_patterns:
            msg = "suffix_patterns cannot contain an empty pattern"
            raise ValueError(msg)


DEFAULT_RULES = ClassificationRules()


class Classifier:
    """Applies classification rules to filesystem paths.

    Args:
        rules: Rule tables to apply. Defaults to DEFAULT_RULES.
    """

    def __init__(self, rules: ClassificationRules = DEFAULT_RULES) -> None:
        self._rules = rules

    @property
    def rules(self) -> ClassificationRules:
        """Rule tables in use."""
        return self._rules

    def classify_file(self, path: Path) -> bool:
        """Check if a path's name marks it as an unwanted file.

        Args:
            path: Path to check. Only its name is inspected.

        Returns:
            True if the extension, a suffix pattern, a system filename
            or an exact filename matches.
        """
        name = path.name

        if path.suffix.lower() in self._rules.extensions:
            return True

        if any(name.endswith(pattern) for pattern in self._rules.suffix_patterns):
            return True

        if name.lower() in self._rules.system_files:
            return True

        return name in self._rules.exact_names

    def classify_directory(self, path: Path) -> bool:
        """Check if a path is an unwanted directory.

        Non-directories always classify False.

        Args:
            path: Path to check.

        Returns:
            True if the path is an existing directory whose lowercased
            basename is an unwanted directory name.
        """
        if not path.is_dir():
            return False
        return path.name.lower() in self._rules.directory_names

    def is_unwanted(self, path: Path) -> bool:
        """Check if a path is an unwanted entry of either kind.

        The directory rules are consulted first, so an entry matching
        both rule kinds is treated as a directory.
        """
        return self.classify_directory(path) or self.classify_file(path)
