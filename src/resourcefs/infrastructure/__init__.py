"""Infrastructure - logging bootstrap and the local storage capability."""
