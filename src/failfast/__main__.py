from failfast.cli import app

app(prog_name="failfast")
