"""External collaborators: cache invalidation and AWS clients."""
