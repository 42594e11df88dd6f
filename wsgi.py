from garasi import create_app

# gunicorn wsgi:app
app = create_app()
