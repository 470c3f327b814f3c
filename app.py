from schoolboard import create_app

# Expose a WSGI-compatible app object for production servers (e.g., gunicorn, waitress)
app = create_app()

import os


def print_startup_info(port):
    print("🚀 Starting SchoolBoard")
    print("=" * 50)
    print(f"📍 Local URL: http://localhost:{port}")
    print("=" * 50)
    print("📋 Pages:")
    print("  ✅ Kontak Sekolah  /about/")
    print("  ✅ Prestasi        /achievements/")
    print("=" * 50)
    print("🔑 Create a login with: flask --app app create-user EMAIL PASSWORD --level sd --role admin")
    print("⚠️  Press Ctrl+C to stop the server")
    print("=" * 50)


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    print_startup_info(port)
    app.run(
        host=os.environ.get('HOST', '127.0.0.1'),
        port=port,
        debug=os.environ.get('FLASK_DEBUG', '1') == '1',
        use_reloader=False  # Disable reloader to prevent double startup
    )
