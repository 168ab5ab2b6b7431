# cancer_app/wsgi.py
# gunicorn: gunicorn "cancer_app.wsgi:app"
from cancer_app import create_app
from cancer_app.core.config import Config

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=Config.PORT, threaded=True)
