from . import Notation, register_notation


@register_notation
class Hexadecimal(Notation):
    """Hex digits '0'-'f' (either case), '.' for an empty cell."""
    name = "hex"
    symbols = "0123456789abcdef"
    blanks = "."
    case_sensitive = False
