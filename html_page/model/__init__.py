"""Page state model: the fluent mutators and the snapshot they produce.

Examples
--------
>>> from html_page.model import PageModel
>>> page = PageModel().set_title("Home").set_title_suffix("Example")
>>> page.snapshot().title_separator
' :: '
"""

from .models import Doctype, PageSnapshot, Script, StyleSheet, ValidationError
from .page import PageModel

__all__ = [
    "Doctype",
    "PageModel",
    "PageSnapshot",
    "Script",
    "StyleSheet",
    "ValidationError",
]
