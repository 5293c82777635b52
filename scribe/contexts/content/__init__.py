"""
Content Context

Responsibilities:
- Parses YAML front matter from markdown documents
- Represents each published document as a ContentItem
- Loads the site input directory into ContentItem instances

Owns: Front matter parsing, content item representation, content file discovery
Never: Groups, orders, or navigates series
"""

from scribe.contexts.content.content_item import SERIES_TAG, ContentItem
from scribe.contexts.content.exceptions import FrontMatterError
from scribe.contexts.content.front_matter import parse_front_matter
from scribe.contexts.content.loader import load_content_items

__all__ = [
    "ContentItem",
    "SERIES_TAG",
    "FrontMatterError",
    "parse_front_matter",
    "load_content_items",
]
