"""Decimal point vs. thousands separator disambiguation."""

DECIMAL_TAIL_MAX = 2


def normalize_separators(fragment: str) -> str:
    """Rewrite a numeric fragment so that only '.' marks the decimal point.

    Rules, in order:
      * both ',' and '.' present: the last separator is the decimal point,
        every other separator is a grouping mark and is dropped;
      * only ',': when the segment after the last comma has at most two
        characters that comma is the decimal point, otherwise all commas
        are grouping marks;
      * several '.': same test on the segment after the last dot;
      * zero or one '.': returned unchanged.

    Examples:
        >>> normalize_separators("1.234.567,89")
        '1234567.89'
        >>> normalize_separators("1,000,000")
        '1000000'
        >>> normalize_separators("1000,50")
        '1000.50'
        >>> normalize_separators("1.000.000")
        '1000000'
    """
    comma_count = fragment.count(",")
    dot_count = fragment.count(".")

    if comma_count and dot_count:
        last = max(fragment.rfind(","), fragment.rfind("."))
        head = fragment[:last].replace(",", "").replace(".", "")
        return f"{head}.{fragment[last + 1:]}"

    if comma_count:
        return _split_on_last(fragment, ",")

    if dot_count > 1:
        return _split_on_last(fragment, ".")

    return fragment


def _split_on_last(fragment: str, separator: str) -> str:
    head, _, tail = fragment.rpartition(separator)
    if len(tail) <= DECIMAL_TAIL_MAX:
        return f"{head.replace(separator, '')}.{tail}"
    return fragment.replace(separator, "")
