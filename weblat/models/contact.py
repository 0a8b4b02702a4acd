"""
Contact Entry Model
"""

from weblat.extensions import db


class ContactEntry(db.Model):
    """Submission of the public contact form"""
    __tablename__ = 'contact_entries'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    message = db.Column(db.Text, nullable=False)

    def __repr__(self):
        return f'<ContactEntry {self.id} from {self.email}>'
