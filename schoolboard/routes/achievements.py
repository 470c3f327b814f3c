from flask import Blueprint, render_template, request, flash, redirect, url_for, abort
from flask_login import login_required
from schoolboard.services.scope_service import ScopeService
from schoolboard.services.about_service import FALLBACK_ERROR
from schoolboard.services.achievement_service import AchievementService

bp = Blueprint('achievements', __name__, url_prefix='/achievements')

EMPTY_FORM = {
    'title': '',
    'description': '',
    'achievement_date': '',
    'image_url': '',
}

def _form_values(achievement):
    return {
        'title': achievement.title,
        'description': achievement.description,
        'achievement_date': achievement.achievement_date.isoformat() if achievement.achievement_date else '',
        'image_url': achievement.image_url or '',
    }

def _get_or_404(achievement_id, scope):
    achievement = AchievementService.fetch_achievement(achievement_id)
    if achievement is None or not AchievementService.is_visible(achievement, scope.role, scope.school_level):
        abort(404)
    return achievement

def _no_scope():
    flash(FALLBACK_ERROR, 'danger')
    return redirect(url_for('achievements.index'))

@bp.route('/')
def index():
    scope = ScopeService.resolve()
    achievements = AchievementService.fetch_achievements(scope.role, scope.school_level) if scope else []
    return render_template('achievements/index.html', scope=scope, achievements=achievements)

@bp.route('/new')
@login_required
def new():
    if ScopeService.resolve() is None:
        return _no_scope()
    return render_template('achievements/form.html', form=dict(EMPTY_FORM), editing_id=None)

@bp.route('/<int:achievement_id>')
@login_required
def detail(achievement_id):
    scope = ScopeService.resolve()
    if scope is None:
        abort(403)
    achievement = _get_or_404(achievement_id, scope)
    return render_template('achievements/detail.html', achievement=achievement)

@bp.route('/<int:achievement_id>/edit')
@login_required
def edit(achievement_id):
    scope = ScopeService.resolve()
    if scope is None:
        return _no_scope()
    achievement = _get_or_404(achievement_id, scope)
    return render_template('achievements/form.html', form=_form_values(achievement), editing_id=achievement.id)

@bp.route('/save', methods=['POST'])
@login_required
def save():
    editing_id = request.form.get('editing_id', type=int)
    form = {name: request.form.get(name, '') for name in EMPTY_FORM}

    scope = ScopeService.resolve()
    if scope is None:
        flash(FALLBACK_ERROR, 'danger')
        return render_template('achievements/form.html', form=form, editing_id=editing_id)

    if editing_id:
        _get_or_404(editing_id, scope)
    row, message = AchievementService.save_achievement(editing_id, form, scope.school_level)

    if row is None:
        flash(message, 'danger')
        return render_template('achievements/form.html', form=form, editing_id=editing_id)

    flash(message, 'success')
    return redirect(url_for('achievements.index'))

@bp.route('/<int:achievement_id>/delete', methods=['GET', 'POST'])
@login_required
def delete(achievement_id):
    scope = ScopeService.resolve()
    if scope is None:
        return _no_scope()
    achievement = _get_or_404(achievement_id, scope)

    if request.method == 'GET':
        return render_template('achievements/confirm_delete.html', achievement=achievement)

    deleted, message = AchievementService.delete_achievement(
        achievement_id, confirmed=request.form.get('confirm') == 'yes'
    )
    if message:
        flash(message, 'success' if deleted else 'danger')
    return redirect(url_for('achievements.index'))
