"""Author name matching: exact, trimmed, and fuzzy (edit distance)."""

import re

# Punctuation removed before fuzzy comparison.
_PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")

MAX_NAME_DISTANCE = 2
MAX_SURNAME_DISTANCE = 1
MIN_SURNAME_LENGTH = 4


def levenshtein(a: str, b: str) -> int:
    """
    Compute the Levenshtein edit distance between two strings.

    Insertions, deletions and substitutions each cost 1.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b
    """
    # Rows follow b, columns follow a.
    matrix = [[i] + [0] * len(a) for i in range(len(b) + 1)]
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],
                    matrix[i][j - 1],
                    matrix[i - 1][j],
                )

    return matrix[len(b)][len(a)]


def normalize_name(name: str) -> str:
    """Lowercase, drop punctuation and trim surrounding whitespace."""
    return _PUNCTUATION_RE.sub("", name.lower()).strip()


def exact_match(answer: str, author: str) -> bool:
    return answer == author


def trimmed_match(answer: str, author: str) -> bool:
    """Match after trimming whitespace only; case and punctuation still count."""
    return answer.strip() == author.strip()


def fuzzy_match(answer: str, author: str) -> bool:
    """
    Forgiving match for typed answers.

    The normalized answer is accepted when it is within two edits of the
    normalized author, or within one edit of the author's surname when that
    surname has more than three characters.
    """
    guess = normalize_name(answer)
    target = normalize_name(author)

    if levenshtein(guess, target) <= MAX_NAME_DISTANCE:
        return True

    tokens = target.split()
    surname = tokens[-1] if tokens else ""
    return (
        len(surname) >= MIN_SURNAME_LENGTH
        and levenshtein(guess, surname) <= MAX_SURNAME_DISTANCE
    )
