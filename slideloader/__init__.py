"""
SlideLoader

Serves a remark.js slideshow whose markdown source is picked from the URL.
"""

__version__ = "1.0.0"
