"""Domain services for the Tuskers API."""
