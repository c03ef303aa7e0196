"""Text formatting patterns for UI components"""

from rich.text import Text as RichText
from typing import Optional


class Text(RichText):
    """Enhanced Text class with formatting methods"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._max_label_width = 0

    def append_field(
        self,
        label: str,
        value: str,
        *,  # Force keyword arguments
        note: Optional[str] = None,
        label_style: str = "dim",
        value_style: str = "cyan",
        note_style: str = "dim",
        indent: int = 0,
        align: bool = False,
        add_newline: bool = True,
    ) -> "Text":
        """Append a field with optional alignment and note

        Args:
            label: The field label
            value: The field value
            note: Optional note shown in parentheses after the value
            label_style: Style for the label (default: dim)
            value_style: Style for the value (default: cyan)
            note_style: Style for the note (default: dim)
            indent: Number of indentation levels (default: 0)
            align: Whether to align the values (default: False)
            add_newline: Whether to add a newline after the field (default: True)

        Returns:
            self for method chaining
        """
        indent_str = " " * (indent * 2)

        if align:
            self._max_label_width = max(self._max_label_width, len(label) + 1)
            formatted_label = f"{indent_str}{label + ':':<{self._max_label_width}}"
        else:
            formatted_label = f"{indent_str}{label}:"

        self.append(formatted_label, style=label_style)
        self.append(" ")
        self.append(value, style=value_style)

        if note:
            self.append(f" ({note})", style=note_style)

        if add_newline:
            self.append("\n")

        return self
