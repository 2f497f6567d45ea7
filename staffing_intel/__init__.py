"""Healthcare staffing intelligence: SerpAPI-backed hiring and news signals scored per company."""

__version__ = "0.1.0"
