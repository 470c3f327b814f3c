from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from flask_login import login_user, logout_user, login_required, current_user
from schoolboard.models.user import User

bp = Blueprint('auth', __name__, url_prefix='/auth')

@bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('about.index'))

    if request.method == 'POST':
        email = (request.form.get('email') or '').strip()
        password = request.form.get('password') or ''
        user = User.query.filter_by(email=email).first()

        if user and user.check_password(password):
            login_user(user)
            current_app.logger.info(f'User logged in: {email}')
            next_page = request.args.get('next')
            # Only follow local redirects
            if not next_page or not next_page.startswith('/') or next_page.startswith('//'):
                next_page = url_for('about.index')
            return redirect(next_page)

        current_app.logger.warning(f'Failed login attempt for {email}')
        flash('Email atau kata sandi salah', 'danger')
        return render_template('auth/login.html', email=email)

    return render_template('auth/login.html')

@bp.route('/logout')
@login_required
def logout():
    current_app.logger.info(f'User logged out: {current_user.email}')
    logout_user()
    flash('Anda telah keluar.', 'info')
    return redirect(url_for('auth.login'))
