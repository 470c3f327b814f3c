from flask import current_app
from schoolboard.models.about import About
from schoolboard.store import RecordStore, StoreError
from datetime import datetime
from typing import Dict, Optional, Tuple

FALLBACK_ERROR = "Terjadi kesalahan"


class AboutService:
    """Contact record of a school level: read it, create it once, then update it"""

    @staticmethod
    def fetch_contact(level: Optional[str], store: Optional[RecordStore] = None) -> Optional[About]:
        """Return the contact record of ``level`` or None if it has none yet"""
        if not level:
            return None
        store = store or RecordStore()
        try:
            return store.select_one('about', school_level=level)
        except StoreError as e:
            current_app.logger.error(f"Error fetching contact for level {level}: {e.message}")
            return None

    @staticmethod
    def save_contact(existing: Optional[About], fields: Dict, level: Optional[str],
                     store: Optional[RecordStore] = None) -> Tuple[Optional[About], str]:
        """
        Save contact phone and email.

        Updates ``existing`` in place when given, otherwise inserts the first
        record for ``level``. Callers pass the record they fetched so a level
        never ends up with two rows.
        """
        store = store or RecordStore()
        values = {
            'contact_phone': (fields.get('contact_phone') or '').strip() or None,
            'contact_email': (fields.get('contact_email') or '').strip() or None,
        }

        try:
            if existing is not None:
                values['updated_at'] = datetime.utcnow()
                row = store.update('about', existing.id, values)
            else:
                if not level:
                    return None, FALLBACK_ERROR
                row = store.insert('about', dict(
                    values,
                    title=current_app.config.get('DEFAULT_ABOUT_TITLE', 'Profil Sekolah'),
                    content='',
                    school_level=level,
                ))
        except StoreError as e:
            current_app.logger.error(f"Error saving contact for level {level}: {e.message}")
            return None, e.message or FALLBACK_ERROR

        current_app.logger.info(f"Contact for level {row.school_level} saved (id {row.id})")
        return row, "Data kontak berhasil disimpan!"
