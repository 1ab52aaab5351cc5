"""HTTP layer of the user store service."""
