"""Version information for taggable."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to API or persisted index layout
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Localized tag collections
#         - localized_tags field keyed by locale, per-locale merge on assignment
#         - Index entries keyed by (tag, locale)
#         - Context-local current locale for queries and index reads
#         - Index replacement runs in a stream transaction (failed rebuild keeps old index)
# 0.1.0 - Initial release
#         - Flat tag lists with configurable separator
#         - tagged_with / tagged_with_all / tagged_with_any filters
#         - Full rebuild of the tag frequency index on tag changes
