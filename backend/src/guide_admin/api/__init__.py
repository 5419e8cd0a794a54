"""HTTP handlers for the admin dashboard."""
