from sprout.cli import app

app(prog_name="sprout")
