__title__ = "xhttp"
__description__ = "A small httpie-style command-line HTTP client."
__version__ = "1.0.0"
