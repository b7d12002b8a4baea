class PageRenderError(Exception):
    """Raised when the tree page cannot be rendered."""
