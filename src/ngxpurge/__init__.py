"""ngxpurge: purge the Nginx FastCGI/proxy cache when published content changes."""

__version__ = "1.0.0"
