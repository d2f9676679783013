"""Input clients for collecting user data."""
