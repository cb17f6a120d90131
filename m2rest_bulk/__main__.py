from .cli import app

app(prog_name="m2rest-bulk")
