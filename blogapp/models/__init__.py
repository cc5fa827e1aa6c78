"""
Models Package

Exports all models for easy importing.
"""

from blogapp.models.user import User, ROLES
from blogapp.models.post import Post

__all__ = ['User', 'Post', 'ROLES']
