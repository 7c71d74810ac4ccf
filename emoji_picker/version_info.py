# Version metadata for emoji_picker
__version__ = "1.0.0"
__build_type__ = "source"
__build_timestamp__ = "unreleased"
