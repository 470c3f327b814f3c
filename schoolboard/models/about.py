from schoolboard import db
from datetime import datetime

class About(db.Model):
    """Contact record of a school level. One row per level."""
    __tablename__ = 'about'

    id = db.Column(db.Integer, primary_key=True)
    school_level = db.Column(db.String(10), unique=True, nullable=False)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False, default='')
    contact_phone = db.Column(db.String(30))
    contact_email = db.Column(db.String(120))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<About {self.id}: {self.school_level}>'
