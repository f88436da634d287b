"""
Default configuration files
"""
