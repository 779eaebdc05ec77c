"""tracelink command line interface."""
