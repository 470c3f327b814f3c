from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate
from config import Config

# ✅ Fix for Windows: Use PyMySQL instead of MySQLdb
import pymysql
pymysql.install_as_MySQLdb()

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)

    login_manager.login_view = 'auth.login'
    login_manager.login_message = 'Silakan masuk untuk melanjutkan.'
    login_manager.login_message_category = 'info'

    with app.app_context():
        # Import models and routes here to register with the app
        from schoolboard.models import User, Profile, UserRole, About, Achievement
        from schoolboard.routes import main, auth, about, achievements
        from schoolboard import cli
        from schoolboard.utils import formatting

        # Register blueprints
        app.register_blueprint(main.bp)
        app.register_blueprint(auth.bp)
        app.register_blueprint(about.bp)
        app.register_blueprint(achievements.bp)

        cli.register_commands(app)
        formatting.register_filters(app)

        # Create all database tables (if not already created)
        db.create_all()

        # Register error handlers
        register_error_handlers(app)

    return app

def register_error_handlers(app):
    """Register global error handlers"""
    from flask import render_template
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return render_template('errors/500.html'), 500

    @app.errorhandler(403)
    def forbidden_error(error):
        return render_template('errors/403.html'), 403

    @app.errorhandler(Exception)
    def handle_exception(e):
        # Other HTTP exceptions keep their own status and body
        if isinstance(e, HTTPException):
            return e

        app.logger.error(f'Unhandled exception: {str(e)}')

        # For any other exception, return 500
        db.session.rollback()
        return render_template('errors/500.html'), 500
