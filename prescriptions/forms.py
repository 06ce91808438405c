"""Staged state for the "Add a prescription" form.

Every input is controlled: its value lives here and only its own change
handler writes it. Submitting sends the staged values through
:class:`prescriptions.api.PrescriptionsAPI` and reloads the list.
"""

import logging

import requests

logger = logging.getLogger(__name__)

# Form field -> wire name
PAYLOAD_KEYS = {
    'prescription_name': 'prescriptionName',
    'prescription_doctor': 'doctorprescribed',
    'prescription_date': 'dateprescribed',
    'prescription_amount': 'amount',
    'prescription_directions': 'generalinstructions',
}

# Form field -> label shown next to the input
LABELS = {
    'prescription_name': 'Prescription name',
    'prescription_doctor': 'Select a doctor',
    'prescription_date': 'Date prescribed',
    'prescription_amount': 'Number of tablets',
    'prescription_directions': 'Directions for use',
}

FIELDS = tuple(PAYLOAD_KEYS)


class PrescriptionForm:

    def __init__(self, api=None, user_id=None):
        self.api = api
        self.user_id = user_id
        self.prescription_name = ''
        self.prescription_doctor = ''
        self.prescription_date = ''
        self.prescription_amount = ''
        self.prescription_directions = ''
        self.prescriptions = []
        self.error = ''

    @classmethod
    def from_mapping(cls, data, **kwargs):
        """Stage every known field present in *data*, e.g. ``request.form``."""
        form = cls(**kwargs)
        for field in FIELDS:
            if field in data:
                form.handle_change(field, data[field])
        return form

    @property
    def state(self):
        values = {field: getattr(self, field) for field in FIELDS}
        values.update(prescriptions=list(self.prescriptions), error=self.error)
        return values

    # Change handlers --------------------------------------------------------------

    def handle_change(self, field, value):
        if field not in PAYLOAD_KEYS:
            raise KeyError(f'Unknown form field: {field}')
        setattr(self, field, '' if value is None else str(value))

    def handle_prescription_name_change(self, value):
        self.handle_change('prescription_name', value)

    def handle_prescription_doctor_change(self, value):
        self.handle_change('prescription_doctor', value)

    def handle_prescription_date_change(self, value):
        self.handle_change('prescription_date', value)

    def handle_prescription_amount_change(self, value):
        self.handle_change('prescription_amount', value)

    def handle_prescription_directions_change(self, value):
        self.handle_change('prescription_directions', value)

    # Submission -------------------------------------------------------------------

    def to_payload(self):
        return {key: getattr(self, field) for field, key in PAYLOAD_KEYS.items()}

    def load_prescriptions(self):
        if self.api is None or self.user_id is None:
            return self.prescriptions
        try:
            self.prescriptions = self.api.get_prescriptions(self.user_id)
        except requests.RequestException as exc:
            logger.error('Loading prescriptions failed: %s', exc)
            self.error = str(exc)
        return self.prescriptions

    def handle_form_submit(self):
        """Save the staged prescription and refresh the list.

        Returns the updated user, or None when saving failed; the failure is
        kept in ``error``.
        """
        logger.info('Adding prescription information')
        for field in FIELDS:
            logger.debug('%s: %s', field, getattr(self, field))

        if self.api is None:
            self.error = 'No API configured'
            return None

        try:
            user = self.api.save_log(self.to_payload(), user_id=self.user_id)
        except requests.RequestException as exc:
            logger.error('Saving prescription failed: %s', exc)
            self.error = str(exc)
            return None

        self.error = ''
        if self.user_id is None:
            self.user_id = user.get('_id')
        self.load_prescriptions()
        return user
