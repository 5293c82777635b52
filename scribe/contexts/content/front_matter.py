"""
Front Matter Parsing

Splits a markdown document into its YAML front matter and body. Front matter is
the block fenced by `---` lines at the very top of the file:

    ---
    title: Setting Up
    seriesId: galactic-archives
    part: 1
    ---
    Body text...

YAML is parsed with OmegaConf without resolving interpolations, so author text
containing `${...}` is kept verbatim.
"""

import re
from pathlib import Path
from typing import Any, Dict, Tuple

from omegaconf import DictConfig, OmegaConf

from scribe.contexts.content.exceptions import FrontMatterError

# Opening fence, YAML block, closing fence
FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.S | re.M)


def split_front_matter(text: str) -> Tuple[str, str]:
    """
    Split raw document text into (front matter block, body).

    Returns an empty block when the document has no front matter.
    A leading byte order mark is ignored.
    """
    text = text.lstrip("\ufeff")
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return "", text
    return match.group(1), text[match.end():]


def parse_front_matter(text: str, source_path: Path = None) -> Tuple[Dict[str, Any], str]:
    """
    Parse front matter from a markdown document.

    Args:
        text: Full document text
        source_path: File the text came from (used in error messages only)

    Returns:
        Tuple of (front matter dict, body text). Documents without front matter
        yield an empty dict and the whole text as body.

    Raises:
        FrontMatterError: If the YAML is malformed or is not a mapping

    Examples:
        >>> data, body = parse_front_matter("---\\ntitle: Hi\\n---\\nHello")
        >>> data
        {'title': 'Hi'}
        >>> body
        'Hello'
    """
    block, body = split_front_matter(text)
    if not block.strip():
        return {}, body

    try:
        conf = OmegaConf.create(block)
    except Exception as e:
        raise FrontMatterError(
            f"Malformed YAML front matter: {e}", source_path=source_path, snippet=block
        ) from e

    if not isinstance(conf, DictConfig):
        raise FrontMatterError(
            "Front matter must be a mapping of keys to values",
            source_path=source_path,
            snippet=block,
        )

    return OmegaConf.to_container(conf, resolve=False), body
