"""theca - command line note taking tool."""

__version__ = "0.4.5"
