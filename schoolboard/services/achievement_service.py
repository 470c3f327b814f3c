from flask import current_app
from schoolboard.models.achievement import Achievement
from schoolboard.services.about_service import FALLBACK_ERROR
from schoolboard.store import RecordStore, StoreError
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

REQUIRED_FIELDS = {
    'title': 'Judul prestasi wajib diisi',
    'description': 'Deskripsi wajib diisi',
    'achievement_date': 'Tanggal wajib diisi',
}


class AchievementService:

    @staticmethod
    def fetch_achievements(role: Optional[str], level: Optional[str],
                           store: Optional[RecordStore] = None) -> List[Achievement]:
        """
        Achievements, newest first.

        Only the admin role is limited to its own level. Every other role, and
        an admin without a level, sees achievements of all levels.
        """
        store = store or RecordStore()
        filters = {}
        if role == current_app.config.get('ADMIN_ROLE', 'admin') and level:
            filters['school_level'] = level
        try:
            return store.select_many('achievements', filters, order_by='achievement_date', descending=True)
        except StoreError as e:
            current_app.logger.error(f"Error fetching achievements: {e.message}")
            return []

    @staticmethod
    def is_visible(achievement: Achievement, role: Optional[str], level: Optional[str]) -> bool:
        """Same rule as the list: an admin with a level only sees that level"""
        if role == current_app.config.get('ADMIN_ROLE', 'admin') and level:
            return achievement.school_level == level
        return True

    @staticmethod
    def fetch_achievement(achievement_id, store: Optional[RecordStore] = None) -> Optional[Achievement]:
        store = store or RecordStore()
        try:
            return store.select_one('achievements', id=achievement_id)
        except StoreError as e:
            current_app.logger.error(f"Error fetching achievement {achievement_id}: {e.message}")
            return None

    @staticmethod
    def clean_fields(fields: Dict) -> Tuple[Optional[Dict], Optional[str]]:
        """Validate form input. Returns (values, None) or (None, error message)."""
        values = {}
        for name, message in REQUIRED_FIELDS.items():
            value = fields.get(name)
            if isinstance(value, str):
                value = value.strip()
            if not value:
                return None, message
            values[name] = value

        achievement_date = values['achievement_date']
        if isinstance(achievement_date, datetime):
            achievement_date = achievement_date.date()
        elif not isinstance(achievement_date, date):
            try:
                achievement_date = datetime.strptime(str(achievement_date), '%Y-%m-%d').date()
            except ValueError:
                return None, 'Format tanggal tidak valid'
        values['achievement_date'] = achievement_date

        values['image_url'] = (fields.get('image_url') or '').strip() or None
        return values, None

    @staticmethod
    def save_achievement(editing_id, fields: Dict, level: Optional[str],
                         store: Optional[RecordStore] = None) -> Tuple[Optional[Achievement], str]:
        """Update achievement ``editing_id``, or add a new one for ``level``"""
        store = store or RecordStore()
        if not level:
            current_app.logger.warning("Refusing to save achievement without a resolved school level")
            return None, FALLBACK_ERROR
        values, error = AchievementService.clean_fields(fields)
        if error:
            return None, error

        try:
            if editing_id:
                values['updated_at'] = datetime.utcnow()
                row = store.update('achievements', editing_id, values)
                message = "Prestasi berhasil diupdate!"
            else:
                values['school_level'] = level
                row = store.insert('achievements', values)
                message = "Prestasi berhasil ditambahkan!"
        except StoreError as e:
            current_app.logger.error(f"Error saving achievement: {e.message}")
            return None, e.message or FALLBACK_ERROR

        return row, message

    @staticmethod
    def delete_achievement(achievement_id, confirmed: bool,
                           store: Optional[RecordStore] = None) -> Tuple[bool, Optional[str]]:
        """Delete for good. Without confirmation no store call is made."""
        if not confirmed:
            return False, None
        store = store or RecordStore()
        try:
            store.delete('achievements', achievement_id)
        except StoreError as e:
            current_app.logger.error(f"Error deleting achievement {achievement_id}: {e.message}")
            return False, e.message or FALLBACK_ERROR

        current_app.logger.info(f"Achievement {achievement_id} deleted")
        return True, "Prestasi berhasil dihapus!"
