from schoolboard import db
from datetime import datetime

class Achievement(db.Model):
    __tablename__ = 'achievements'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    achievement_date = db.Column(db.Date, nullable=False)
    image_url = db.Column(db.String(500))
    school_level = db.Column(db.String(10), index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Achievement {self.id}: {self.title}>'
