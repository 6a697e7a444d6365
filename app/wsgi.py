from app.connect import create_app

app = create_app()
