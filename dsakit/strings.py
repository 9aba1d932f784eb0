"""Pattern searching with Boyer-Moore and finite automata."""


def bad_character_table(pattern: str) -> dict[str, int]:
    """Map each character of ``pattern`` to the index of its last occurrence."""
    return {char: index for index, char in enumerate(pattern)}


def boyer_moore_search(text: str, pattern: str) -> list[int]:
    """Return the shifts at which ``pattern`` occurs in ``text`` (bad-character rule)."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    m, n = len(pattern), len(text)
    last = bad_character_table(pattern)
    shifts = []
    shift = 0
    while shift <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[shift + j]:
            j -= 1
        if j < 0:
            shifts.append(shift)
            if shift + m < n:
                shift += m - last.get(text[shift + m], -1)
            else:
                shift += 1
        else:
            shift += max(1, j - last.get(text[shift + j], -1))
    return shifts


def next_state(pattern: str, state: int, char: str) -> int:
    """Return the automaton state reached from ``state`` on ``char``."""
    m = len(pattern)
    if state < m and char == pattern[state]:
        return state + 1
    for length in range(state, 0, -1):
        if pattern[length - 1] == char and (
            pattern[: length - 1] == pattern[state - length + 1 : state]
        ):
            return length
    return 0


def transition_table(pattern: str) -> list[dict[str, int]]:
    """Build the automaton table; characters absent from a row lead to state 0."""
    alphabet = set(pattern)
    return [
        {char: next_state(pattern, state, char) for char in alphabet}
        for state in range(len(pattern) + 1)
    ]


def transition_table_fast(pattern: str) -> list[dict[str, int]]:
    """Build the same table as :func:`transition_table` in linear time per row."""
    if not pattern:
        return [{}]
    m = len(pattern)
    first = {char: 0 for char in pattern}
    first[pattern[0]] = 1
    table = [first]
    lps = 0
    for i in range(1, m + 1):
        row = dict(table[lps])
        if i < m:
            row[pattern[i]] = i + 1
            lps = table[lps][pattern[i]]
        table.append(row)
    return table


def automaton_search(text: str, pattern: str) -> list[int]:
    """Return the start indices of every occurrence of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    m = len(pattern)
    table = transition_table_fast(pattern)
    found = []
    state = 0
    for index, char in enumerate(text):
        state = table[state].get(char, 0)
        if state == m:
            found.append(index - m + 1)
    return found