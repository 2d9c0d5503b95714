"""SocialNet - friendship graph queries: paths, exclusions and recommendations."""

__version__ = "0.1.0"
