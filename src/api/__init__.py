"""HTTP API for the document formatter."""
