"""
Post Model
"""

from weblat.extensions import db


class Post(db.Model):
    """Blog post"""
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)

    def __repr__(self):
        return f'<Post {self.id} {self.title!r}>'
