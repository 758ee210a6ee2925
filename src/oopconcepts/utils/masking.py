"""Masking of sensitive identifiers in reports."""

VISIBLE_DIGITS = 4


def mask_card_number(card_number: str) -> str:
    """Hide all but the last four digits of a card number.

    Separators and characters that are already masked are kept, so
    "**** **** **** 1234" comes back unchanged and "4111 1111 1111 1234"
    becomes "**** **** **** 1234".
    """
    digit_count = sum(ch.isdigit() for ch in card_number)
    to_hide = digit_count - VISIBLE_DIGITS
    if to_hide <= 0:
        return card_number

    masked = []
    for ch in card_number:
        if ch.isdigit() and to_hide > 0:
            masked.append("*")
            to_hide -= 1
        else:
            masked.append(ch)
    return "".join(masked)
