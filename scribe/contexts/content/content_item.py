"""
Content Item Structure

Defines the structured representation of one published document (a markdown
page with front matter). This structure is the interface between the Content
context, which loads items from disk, and the Series context, which groups and
navigates them.
"""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Optional, Tuple

from scribe.contexts.content.front_matter import parse_front_matter

# Tag marking a series overview/landing page
SERIES_TAG = "series"


def normalize_tags(raw: Any) -> Tuple[str, ...]:
    """
    Normalize front matter tags to a tuple of strings.

    Front matter may give a single tag as a plain string or several as a list.
    Missing tags yield an empty tuple.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    return tuple(str(tag) for tag in raw if tag is not None)


def coerce_series_id(raw: Any) -> Optional[str]:
    """Series ids compare as text, so a numeric `seriesId: 2024` groups as "2024"."""
    if raw is None:
        return None
    return str(raw)


def coerce_part(raw: Any) -> Optional[int]:
    """
    Read a part number written as an int, an integral float, or a numeric string.

    Anything else is treated as missing.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def derive_url(source_path: str) -> str:
    """
    Derive a page URL from its path relative to the input directory.

    Follows the pretty-permalink convention of static site generators:
    - musings/hello.md -> /musings/hello/
    - musings/index.md -> /musings/
    - index.md -> /
    """
    path = PurePosixPath(source_path)
    parts = list(path.parent.parts)
    if path.stem != "index":
        parts.append(path.stem)
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


@dataclass(frozen=True)
class ContentItem:
    """
    One published document.

    Attributes:
        source_path: Path relative to the input directory, POSIX style (e.g., "musings/hello.md")
        url: Output URL of the rendered page
        title: Page title from front matter
        date: Publication date as written in front matter
        series_id: Series identifier (front matter `seriesId`); None if not part of a series
        part: Ordinal position within the series; None if not given
        tags: Tag labels; "series" marks a series overview page
        data: Full front matter
        body: Document body (opaque to series indexing)
    """

    source_path: str
    url: str
    title: str = ""
    date: Optional[str] = None
    series_id: Optional[str] = None
    part: Optional[int] = None
    tags: Tuple[str, ...] = ()
    data: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
    body: str = field(default="", compare=False, repr=False)

    @classmethod
    def from_front_matter(cls, source_path: str, data: Dict[str, Any], body: str = "") -> "ContentItem":
        """
        Build an item from already-parsed front matter.

        An explicit string `permalink` in front matter overrides the derived URL.
        `seriesId` is stored as text and `part` as an int (None if not numeric).
        """
        permalink = data.get("permalink")
        url = permalink if isinstance(permalink, str) else derive_url(source_path)
        date = data.get("date")

        return cls(
            source_path=source_path,
            url=url,
            title=str(data.get("title") or ""),
            date=str(date) if date is not None else None,
            series_id=coerce_series_id(data.get("seriesId")),
            part=coerce_part(data.get("part")),
            tags=normalize_tags(data.get("tags")),
            data=data,
            body=body,
        )

    @classmethod
    def from_file(cls, path: Path, input_dir: Path) -> "ContentItem":
        """
        Load an item from a markdown file.

        Args:
            path: File to read
            input_dir: Site input directory; source_path is recorded relative to it

        Raises:
            FileNotFoundError: If path does not exist
            FrontMatterError: If the front matter cannot be parsed
        """
        text = path.read_text(encoding="utf-8")
        data, body = parse_front_matter(text, source_path=path)
        source_path = path.relative_to(input_dir).as_posix()
        return cls.from_front_matter(source_path, data, body)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @property
    def is_series_overview(self) -> bool:
        """True for a series landing page rather than a numbered member."""
        return self.has_tag(SERIES_TAG)

    @property
    def output_stem(self) -> str:
        """URL without surrounding slashes, usable as a relative output path."""
        return self.url.strip("/") or "index"
