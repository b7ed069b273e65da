from biapi.cli import app

app(prog_name="biapi")
