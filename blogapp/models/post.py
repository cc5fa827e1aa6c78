"""
Post Model
"""

from blogapp.extensions import db


class Post(db.Model):
    """A blog entry written by one user"""
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    contents = db.Column(db.Text, nullable=False)

    @property
    def username(self):
        return self.author.username

    def __repr__(self):
        return f'<Post {self.id} by user {self.user_id}>'
