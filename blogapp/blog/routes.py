"""
Blog Routes
"""

from flask import abort, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required

from blogapp.blog import blog_bp
from blogapp.services import create_post, find_user_by_id, get_post, list_posts, posts_by_user, update_post


@blog_bp.route('/')
def index():
    return render_template('index.html')


@blog_bp.route('/blog')
def blog():
    """All posts, newest last"""
    return render_template('blog.html', posts=list_posts())


@blog_bp.route('/blog', methods=['POST'])
@login_required
def new_post():
    contents = request.form.get('contents', '').strip()
    if not contents:
        flash('A post needs some contents.', 'danger')
        return redirect(url_for('blog.blog'))

    try:
        create_post(current_user.id, contents)
        flash('Post published.', 'success')
    except Exception:
        flash('Could not publish post.', 'danger')
    return redirect(url_for('blog.blog'))


@blog_bp.route('/profile/<int:user_id>')
@login_required
def profile(user_id):
    """A user's own profile page; other users' profiles are forbidden."""
    if current_user.id != user_id:
        abort(403)

    user = find_user_by_id(user_id)
    if user is None:
        abort(404)

    return render_template('profile.html', user=user, posts=posts_by_user(user_id))


@blog_bp.route('/posts/<int:post_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_post(post_id):
    """Edit a post; only its author may do so."""
    post = get_post(post_id)
    if post is None:
        abort(404)
    if post.user_id != current_user.id:
        abort(403)

    if request.method == 'POST':
        contents = request.form.get('contents', '').strip()
        if not contents:
            flash('A post needs some contents.', 'danger')
            return render_template('edit_post.html', post=post), 400
        try:
            update_post(post_id, contents)
            flash('Post updated.', 'success')
        except Exception:
            flash('Could not update post.', 'danger')
        return redirect(url_for('blog.profile', user_id=current_user.id))

    return render_template('edit_post.html', post=post)
