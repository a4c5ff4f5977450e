"""Role management service package."""
