class ScraperError(Exception):
    """Base class for scraper exceptions."""
    pass


class ExtractionError(ScraperError):
    """Raised when a single field cannot be read from a matched node."""
    pass


class NetworkError(ScraperError):
    """Raised when network or page loading fails."""
    pass


class UsageError(ScraperError):
    """Raised when the command line is called with the wrong arguments."""
    pass
