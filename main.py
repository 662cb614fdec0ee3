from inbox.main import create_app

app = create_app()
