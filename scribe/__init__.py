"""
SCRIBE - Series Content Registry for Indexed Blog Entries

A build-time content indexer for a static blog. Reads markdown posts with YAML
front matter, groups multi-part tutorials into ordered series, and renders
series navigation for the site.

Architecture:
- Content Context: Front matter parsing and content collection loading
- Series Context: Series grouping and previous/next/overview navigation
- Rendering Context: Navigation fragments, series listing, passthrough copy
"""

__version__ = "0.1.0"
