"""
gitcfg - typed git configuration

Parses a git config file into typed core and remote settings, validates and
defaults them, and writes them back while preserving everything else.

Created: 2025-11-07
"""

__version__ = "0.1.0"
