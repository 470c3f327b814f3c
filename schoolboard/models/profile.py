from schoolboard import db
from datetime import datetime

class Profile(db.Model):
    __tablename__ = 'profiles'

    # Shares its primary key with the owning user
    id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    full_name = db.Column(db.String(120))
    school_level = db.Column(db.String(10))  # 'tk', 'sd', 'smp', 'sma'
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<Profile {self.id}: {self.school_level}>'

class UserRole(db.Model):
    __tablename__ = 'user_roles'
    __table_args__ = (db.UniqueConstraint('user_id', 'role', name='uq_user_roles_user_role'),)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    role = db.Column(db.String(20), nullable=False)  # 'super_admin', 'admin', 'staff', 'viewer'

    def __repr__(self):
        return f'<UserRole {self.user_id}: {self.role}>'
