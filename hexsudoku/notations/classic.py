from . import Notation, register_notation


@register_notation
class Classic(Notation):
    """Newspaper digits: '1'-'9', with '0' or '.' for an empty cell."""
    name = "classic"
    symbols = "123456789"
    blanks = ".0"
