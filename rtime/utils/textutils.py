#rtime\utils\textutils.py


class TextTools:
    """Stateless text utilities."""

    @staticmethod
    def escape_percent(s):
        """Double '%' so strftime prints the text literally."""
        return s.replace("%", "%%")

    @staticmethod
    def to_names(names):
        """Coerce a names sequence to a tuple of strings, text kept as given."""
        if isinstance(names, str):
            # A bare string would otherwise be split into characters
            return (names,)
        return tuple(str(n) for n in names)

    @staticmethod
    def clean_cells(cells):
        """Strip surrounding whitespace from CSV cells."""
        return tuple(c.strip() for c in cells)
