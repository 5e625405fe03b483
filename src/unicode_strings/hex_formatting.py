def zero_pad_hex(value: int, width: int) -> str:
    """Lowercase hex digits of `value`, left-padded with zeros to exactly `width` digits.

    Values too wide for `width` keep only their rightmost `width` digits.
    """
    return f"{value:0{width}x}"[-width:]


def to_octal(value: int) -> str:
    return f"{value:o}"


def parse_lenient_octal(digits: str) -> int:
    """Parses the longest leading run of octal digits, returning 0 if there is none."""
    end = 0
    while end < len(digits) and digits[end] in "01234567":
        end += 1
    return int(digits[:end], 8) if end > 0 else 0
