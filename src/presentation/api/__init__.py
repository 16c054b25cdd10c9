"""API support shared by the versioned routers (request middleware)."""
