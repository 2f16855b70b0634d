"""HTTP quoting API."""
