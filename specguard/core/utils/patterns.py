import re
from functools import lru_cache
from re import Pattern


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> Pattern[str]:
    """Translate a path glob into an anchored regex.

    `**` spans directories, `*` stays within one path segment and `?` matches
    a single non-separator character.

    Args:
        pattern: The glob pattern string.

    Returns:
        A compiled regex pattern object.
    """
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if pattern.startswith("**/", i):
            # "**/" may also match zero directories
            parts.append("(?:.*/)?")
            i += 3
            continue
        if pattern.startswith("**", i):
            parts.append(".*")
            i += 2
            continue
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
        i += 1

    return re.compile("^" + "".join(parts) + "$")


def path_matches(path: str, pattern: str) -> bool:
    """Check a path against one glob.

    Patterns without a separator (e.g. "*.md") are also tried against the
    file name alone, so they apply at any depth.
    """
    normalized_path = path.replace("\\", "/")
    normalized_pattern = pattern.replace("\\", "/")

    if glob_to_regex(normalized_pattern).match(normalized_path):
        return True
    if "/" not in normalized_pattern:
        return bool(glob_to_regex(normalized_pattern).match(normalized_path.rsplit("/", 1)[-1]))
    return False


def matches_any(path: str, patterns: list[str]) -> bool:
    """Check if a path matches any of the given patterns.

    Args:
        path: The file path to check.
        patterns: A list of glob patterns.

    Returns:
        True if the path matches any pattern, False otherwise.
    """
    if not path or not patterns:
        return False
    return any(path_matches(path, pattern) for pattern in patterns)
