"""Player registry service package."""
