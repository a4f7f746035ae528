# grouper/domain/labels.py
import string


def group_label(index: int) -> str:
    """
    Display label for a zero-based group index: 0 -> "A", 25 -> "Z", 26 -> "AA".

    Labels are for printing only, they are not stable identifiers.
    """
    if index < 0:
        raise ValueError(f"group index must be >= 0, got {index}")
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        label = string.ascii_uppercase[rem] + label
    return label
