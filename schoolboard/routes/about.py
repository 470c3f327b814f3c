from flask import Blueprint, render_template, request, flash, redirect, url_for
from flask_login import login_required
from schoolboard.services.scope_service import ScopeService
from schoolboard.services.about_service import AboutService
from schoolboard.utils.form_state import FormState

bp = Blueprint('about', __name__, url_prefix='/about')

CONTACT_FIELDS = ('contact_phone', 'contact_email')

@bp.route('/')
def index():
    scope = ScopeService.resolve()
    contact = AboutService.fetch_contact(scope.school_level) if scope else None
    form = FormState(CONTACT_FIELDS, contact)
    if request.args.get('edit') == '1':
        form.begin_edit()
    return render_template('about/index.html', scope=scope, form=form)

@bp.route('/', methods=['POST'])
@login_required
def save():
    scope = ScopeService.resolve()
    level = scope.school_level if scope else None
    contact = AboutService.fetch_contact(level)

    form = FormState(CONTACT_FIELDS, contact)
    form.begin_edit()

    if request.form.get('action') == 'cancel':
        form.cancel()
        return render_template('about/index.html', scope=scope, form=form)

    form.submit(request.form)
    row, message = AboutService.save_contact(contact, form.values, level)

    if row is None:
        form.fail()
        flash(message, 'danger')
        return render_template('about/index.html', scope=scope, form=form)

    flash(message, 'success')
    return redirect(url_for('about.index'))
