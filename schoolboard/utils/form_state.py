from typing import Dict, Iterable, Optional

VIEWING = 'viewing'
EDITING = 'editing'
SUBMITTING = 'submitting'


class FormState:
    """
    Edit state of a single-record form.

    ``baseline`` holds the values last fetched from the store and ``values``
    what the form currently shows. Cancelling copies the baseline back.
    """

    def __init__(self, field_names: Iterable[str], record=None):
        self.field_names = list(field_names)
        self.record = record
        self.baseline = self._values_of(record)
        self.values = dict(self.baseline)
        self.state = EDITING if record is None else VIEWING

    def _values_of(self, record) -> Dict[str, str]:
        if record is None:
            return {name: '' for name in self.field_names}
        return {name: getattr(record, name, None) or '' for name in self.field_names}

    @property
    def has_record(self) -> bool:
        return self.record is not None

    @property
    def is_editing(self) -> bool:
        return self.state == EDITING

    @property
    def fields_disabled(self) -> bool:
        if self.state == SUBMITTING:
            return True
        return self.has_record and self.state != EDITING

    @property
    def show_actions(self) -> bool:
        return self.state != VIEWING or not self.has_record

    @property
    def can_cancel(self) -> bool:
        return self.state == EDITING and self.has_record

    def begin_edit(self):
        if self.state == VIEWING:
            self.state = EDITING

    def cancel(self):
        """Drop unsaved input and go back to the last fetched values"""
        self.values = dict(self.baseline)
        if self.has_record:
            self.state = VIEWING

    def submit(self, fields: Optional[Dict] = None):
        if self.state != EDITING:
            raise ValueError(f'Cannot submit a form in state {self.state}')
        if fields is not None:
            self.values = {name: fields.get(name) or '' for name in self.field_names}
        self.state = SUBMITTING

    def fail(self):
        # Input is kept so the user can correct and resubmit
        self.state = EDITING
