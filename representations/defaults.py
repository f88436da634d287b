"""
Package Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in .env or in the application's config/ package
"""

# ============================================================================
# REPRESENTATION DEFAULTS
# ============================================================================

# Folder searched for representation files, relative to the search paths
DEFAULT_REPRESENTATIONS_FOLDER = 'views/representations/'

# Representation files are plain Python
DEFAULT_REPRESENTATION_EXTENSION = 'py'

# Config file holding the representation settings
REPRESENTATION_CONFIG_FILE = 'representation'
