"""HTTP clients for the upstream providers."""
