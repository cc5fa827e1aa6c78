"""
Services Package

Exports all services for easy importing.
"""

from blogapp.services.users import (
    create_user,
    find_user_by_id,
    find_user_by_name,
    list_users,
    set_role,
    verify_password,
)
from blogapp.services.posts import create_post, get_post, list_posts, posts_by_user, update_post

__all__ = [
    'create_user',
    'find_user_by_id',
    'find_user_by_name',
    'list_users',
    'set_role',
    'verify_password',
    'create_post',
    'get_post',
    'list_posts',
    'posts_by_user',
    'update_post',
]
