"""
FastAPI dependencies for the book registry.
"""
from book_registry.services.registry import BookRegistry

# Process-wide registry instance, volatile for the life of the process
book_registry = BookRegistry()


def get_registry() -> BookRegistry:
    """
    Dependency provider for the BookRegistry.
    """
    return book_registry
