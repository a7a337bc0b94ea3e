from tilitoli.main import app

app()
