"""
Tie-break policy for equally valued moves: prefer the column nearest the centre.
"""


def center_distance(col: int, cols: int) -> int:
    """Distance of col from the centre column cols // 2."""
    return abs(cols // 2 - col)


def prefer_center(current: int, candidate: int, cols: int) -> int:
    """
    Choose between two equally valued columns.

    The candidate replaces the current choice only when it is strictly closer
    to the centre, so on equal distance the earlier-found column is kept.
    """
    if center_distance(candidate, cols) < center_distance(current, cols):
        return candidate
    return current

