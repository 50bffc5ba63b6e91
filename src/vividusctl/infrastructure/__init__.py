"""Infrastructure layer: filesystem, process launch, and project layout."""
