from flask import current_app
from schoolboard.store import RecordStore, StoreError
from typing import Iterable, Optional

# Higher number wins when a user holds several roles
ROLE_PRIORITY = {
    'super_admin': 4,
    'admin': 3,
    'staff': 2,
    'viewer': 1,
}


class SessionContext:
    """Scope of the acting user: who they are, their school level and role."""

    def __init__(self, user_id, school_level: str, role: str):
        self.user_id = user_id
        self.school_level = school_level
        self.role = role

    def __eq__(self, other):
        if not isinstance(other, SessionContext):
            return NotImplemented
        return (self.user_id, self.school_level, self.role) == (other.user_id, other.school_level, other.role)

    def __repr__(self):
        return f'<SessionContext user={self.user_id} level={self.school_level} role={self.role}>'


def pick_role(roles: Iterable[str]) -> Optional[str]:
    """Return the highest-priority role.

    Roles missing from ``ROLE_PRIORITY`` rank below every known role and
    are ordered among themselves reverse-alphabetically.
    """
    roles = [r for r in roles if r]
    if not roles:
        return None
    return max(roles, key=lambda r: (ROLE_PRIORITY.get(r, 0), r))


class ScopeService:

    @staticmethod
    def resolve(user=None, store: Optional[RecordStore] = None) -> Optional[SessionContext]:
        """
        Resolve the session scope of ``user`` (the logged-in user by default).

        Returns None when there is no user, no profile, no school level or no
        role. Store failures are logged and also give None, so pages fall back
        to their empty state.
        """
        store = store or RecordStore()
        if user is None:
            user = store.get_current_user()
        if user is None:
            return None

        try:
            profile = store.select_one('profiles', id=user.id)
            role_rows = store.select_many('user_roles', {'user_id': user.id})
        except StoreError as e:
            current_app.logger.error(f"Error resolving scope for user {user.id}: {e.message}")
            return None

        if not profile or not profile.school_level:
            current_app.logger.warning(f"No profile or school level for user {user.id}; scope left unset")
            return None

        role = pick_role(row.role for row in role_rows)
        if not role:
            current_app.logger.warning(f"No role assigned to user {user.id}; scope left unset")
            return None

        return SessionContext(user.id, profile.school_level, role)
