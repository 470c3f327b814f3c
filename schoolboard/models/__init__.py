from schoolboard.models.user import User
from schoolboard.models.profile import Profile, UserRole
from schoolboard.models.about import About
from schoolboard.models.achievement import Achievement

__all__ = ['User', 'Profile', 'UserRole', 'About', 'Achievement']
