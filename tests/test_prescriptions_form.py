import pytest
import requests

from healthlogs.models import HealthLog
from prescriptions.api import PrescriptionsAPI
from prescriptions.forms import FIELDS, PrescriptionForm

HANDLERS = {
    'prescription_name': 'handle_prescription_name_change',
    'prescription_doctor': 'handle_prescription_doctor_change',
    'prescription_date': 'handle_prescription_date_change',
    'prescription_amount': 'handle_prescription_amount_change',
    'prescription_directions': 'handle_prescription_directions_change',
}


def filled_form(**kwargs):
    form = PrescriptionForm(**kwargs)
    form.handle_prescription_name_change('Aspirin')
    form.handle_prescription_doctor_change('Dr. Smith')
    form.handle_prescription_date_change('2020-01-01')
    form.handle_prescription_amount_change('30')
    form.handle_prescription_directions_change('Take twice daily')
    return form


def test_new_form_is_empty():
    form = PrescriptionForm()

    assert form.state == {
        'prescription_name': '',
        'prescription_doctor': '',
        'prescription_date': '',
        'prescription_amount': '',
        'prescription_directions': '',
        'prescriptions': [],
        'error': '',
    }


@pytest.mark.parametrize('field', FIELDS)
def test_change_handler_only_touches_its_field(field):
    form = filled_form()
    before = form.state

    getattr(form, HANDLERS[field])('changed')

    after = form.state
    assert after[field] == 'changed'
    for other in FIELDS:
        if other != field:
            assert after[other] == before[other]


def test_amount_change_keeps_prescription_name():
    form = filled_form()

    form.handle_prescription_amount_change('60')

    assert form.prescription_name == 'Aspirin'
    assert form.prescription_amount == '60'


def test_handle_change_rejects_unknown_field():
    with pytest.raises(KeyError):
        PrescriptionForm().handle_change('error', 'boom')


def test_payload_uses_wire_names():
    assert filled_form().to_payload() == {
        'prescriptionName': 'Aspirin',
        'doctorprescribed': 'Dr. Smith',
        'dateprescribed': '2020-01-01',
        'amount': '30',
        'generalinstructions': 'Take twice daily',
    }


def test_from_mapping_stages_known_fields():
    form = PrescriptionForm.from_mapping({'prescription_name': 'Aspirin', 'colour': 'red'})

    assert form.prescription_name == 'Aspirin'
    assert form.prescription_doctor == ''


def test_submit_stores_exactly_the_staged_values(app, api_session, make_user):
    user = make_user()
    api = PrescriptionsAPI('http://localhost:3001', session=api_session)
    form = filled_form(api=api, user_id=user['_id'])

    updated = form.handle_form_submit()

    assert form.error == ''
    assert len(updated['healthLog']) == 1
    with app.app_context():
        log = HealthLog.query.one()
        assert log.prescription_name == 'Aspirin'
        assert log.doctor_prescribed == 'Dr. Smith'
        assert log.date_prescribed == '2020-01-01'
        assert log.amount == '30'
        assert log.general_instructions == 'Take twice daily'
        assert log.user_id == user['_id']


def test_submit_reloads_prescriptions(api_session, make_user):
    make_user()
    api = PrescriptionsAPI('http://localhost:3001/', session=api_session)
    form = filled_form(api=api)

    form.handle_form_submit()
    form.handle_prescription_name_change('Ibuprofen')
    form.handle_form_submit()

    assert [p['prescriptionName'] for p in form.prescriptions] == ['Aspirin', 'Ibuprofen']


def test_submit_http_error_goes_to_error_slot(api_session):
    api = PrescriptionsAPI('http://localhost:3001', session=api_session)
    form = filled_form(api=api)

    assert form.handle_form_submit() is None
    assert form.error.startswith('404')


class BrokenSession:
    def get(self, url, timeout=None):
        raise requests.ConnectionError('connection refused')

    def post(self, url, json=None, timeout=None):
        raise requests.ConnectionError('connection refused')


def test_submit_transport_error_goes_to_error_slot():
    form = filled_form(api=PrescriptionsAPI('http://localhost:3001', session=BrokenSession()))

    assert form.handle_form_submit() is None
    assert form.error == 'connection refused'
    assert form.prescription_name == 'Aspirin'


def test_submit_without_api_sets_error():
    form = filled_form()

    assert form.handle_form_submit() is None
    assert form.error == 'No API configured'
