"""Common literal values used across html_page.

These constants keep document defaults and position tokens centralized so the
model, the document builder, and tests can import the same values without
drifting. Intended for internal use within the html_page package.

Examples
--------
>>> from html_page import _constants
>>> _constants.DEFAULT_TITLE_SEPARATOR
' :: '
>>> _constants.HEADER_POSITION
'header'
"""

DEFAULT_TITLE_SEPARATOR = " :: "
DEFAULT_MEDIA = "all"
DEFAULT_CHARSET = "UTF-8"
DEFAULT_LANGUAGE = "en"
VIEWPORT = "width=device-width, initial-scale=1"

HEADER_POSITION = "header"
FOOTER_POSITION = "footer"

OPEN_GRAPH_PREFIX = "og:"
TWITTER_PREFIX = "twitter:"
# Social-card properties holding image URLs, stored without their prefix.
IMAGE_PROPERTY = "image"

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
DOCUMENT_TEMPLATE = "document.jinja"
