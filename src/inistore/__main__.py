from inistore.cli.app import app

app(prog_name="inistore")
