"""SiteQuery: build Google `site:` boolean search queries from facet selections."""

__version__ = "0.1.0"
