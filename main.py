from rich.pretty import pprint

from clitree import *

app = App("tool", "inspect files", help_command="help", shell=True, colorful=True)
verbose = app.flag(Target.bool(), "verbose", "v", "show detailed info")


@app.subcommand("info", "show information about a file")
def info(command):
    detailed = Target.bool()
    filename = Target.text()
    command.flag(detailed, "detailed", "d", "include every field")
    command.argument(filename, "FILENAME", "load filename")
    command.action(lambda: pprint({"file": filename.value, "detailed": detailed.value, "verbose": verbose.target.value}))


if __name__ == '__main__':
    invoke(app)
