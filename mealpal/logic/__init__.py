"""Core business logic layer.

Subpackages:
- commands: free-text command interpretation and dispatch
- inventory: stock keeping
- recipes: recipe storage and search
- shopping: shopping lists
- suggestions: recipe suggestions (stored + AI)
"""
__all__ = ["commands", "inventory", "recipes", "shopping", "suggestions"]
