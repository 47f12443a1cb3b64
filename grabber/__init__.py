"""grabber — concurrent batch downloader that saves pages by domain name."""

__version__ = "1.0.0"
