"""Knuth-Morris-Pratt string search."""


def kmp_table(pattern):
    """Back table of pattern: entry i is the length of the longest proper border of pattern[:i].

    Entry 0 is -1 and the table has len(pattern) + 1 entries.
    """
    table = [-1] * (len(pattern) + 1)
    i, j = 0, -1
    while i < len(pattern):
        while j >= 0 and pattern[i] != pattern[j]:
            j = table[j]
        i += 1
        j += 1
        table[i] = j
    return table


def kmp_search(text, pattern):
    """Start indices of every occurrence of pattern in text, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = kmp_table(pattern)
    m = len(pattern)
    found = []
    j = 0
    for i, ch in enumerate(text):
        while j >= 0 and ch != pattern[j]:
            j = table[j]
        j += 1
        if j == m:
            found.append(i + 1 - j)
            j = table[j]
    return found