from flask import request, render_template, redirect, url_for, current_app
from app import store
from app.errors import StoreError
from healthlogs.utils import parse_user_id
from .forms import PrescriptionForm, LABELS
from . import prescriptions_bp

def _render(form, status=200):
    return render_template('prescriptions/index.html', form=form, labels=LABELS), status

def _load(form):
    """Resolve the page's user and fill the form's prescriptions list."""
    user = store.resolve_submit_target(form.user_id)
    form.user_id = user.id
    form.prescriptions = store.health_log_dicts(user.health_logs)
    return form

@prescriptions_bp.route('/prescriptions', methods=['GET'])
def index():
    """My prescriptions page: the add form next to the saved list."""
    try:
        form = PrescriptionForm(user_id=parse_user_id(request.args.get('user_id')))
        _load(form)
    except StoreError as e:
        form = PrescriptionForm()
        form.error = e.message
        return _render(form, e.status_code)
    return _render(form)

@prescriptions_bp.route('/prescriptions', methods=['POST'])
def add_prescription():
    """Save the submitted form, then redirect back to the list."""
    form = PrescriptionForm.from_mapping(request.form)
    try:
        form.user_id = parse_user_id(request.form.get('user_id') or request.args.get('user_id'))
        user = store.submit_health_log(form.to_payload(), user_id=form.user_id)
    except StoreError as e:
        current_app.logger.error(f'Error adding prescription: {e.message}')
        form.error = e.message
        return _render(form, e.status_code)
    return redirect(url_for('prescriptions.index', user_id=user.id))
