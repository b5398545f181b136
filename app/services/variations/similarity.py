from rapidfuzz.distance import Levenshtein


def similarity(str1: str, str2: str) -> float:
    """
    Normalized edit-distance similarity between two strings (0-1).

    ``(max_len - distance) / max_len`` where distance is the case-insensitive
    Levenshtein distance. Two empty strings are identical (1.0).
    """
    longest = max(len(str1), len(str2))
    if longest == 0:
        return 1.0

    distance = Levenshtein.distance(str1.lower(), str2.lower())
    return (longest - distance) / longest
