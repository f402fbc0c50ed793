"""Link extraction from HTML pages."""

from web_enum.extraction.links import (
    directory_links,
    extract_links,
    is_directory_link,
    split_links,
)

__all__ = ["extract_links", "directory_links", "is_directory_link", "split_links"]
