"""
Representation Configuration
Copy this file to your application's config/ package to override it
"""
from representations.defaults import DEFAULT_REPRESENTATIONS_FOLDER
from representations.support.env_helper import EnvHelper

# The folder where will be looked for your representations
REPRESENTATIONS_FOLDER = EnvHelper.get('REPRESENTATIONS_FOLDER', DEFAULT_REPRESENTATIONS_FOLDER)
