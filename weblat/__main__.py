"""
weblat
Application Entry Point

Runs the development server on LISTEN_ADDR.
"""

from weblat import create_app

app = create_app()

if __name__ == '__main__':
    host, _, port = app.config['LISTEN_ADDR'].rpartition(':')
    app.run(host=host or '0.0.0.0', port=int(port))
