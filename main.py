from atelier_crm.main import create_app

app = create_app()
