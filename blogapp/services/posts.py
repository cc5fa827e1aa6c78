"""
Post Service
"""

from blogapp.extensions import db
from blogapp.models import Post


def create_post(user_id, contents):
    post = Post(user_id=user_id, contents=contents)
    try:
        db.session.add(post)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return post


def update_post(post_id, contents):
    """Replace the contents of a post. Returns None if the post does not exist."""
    post = get_post(post_id)
    if post is None:
        return None
    post.contents = contents
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return post


def get_post(post_id):
    return db.session.get(Post, post_id)


def posts_by_user(user_id):
    return Post.query.filter_by(user_id=user_id).order_by(Post.id).all()


def list_posts():
    return Post.query.order_by(Post.id).all()
