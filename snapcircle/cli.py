import cmd
import shlex
import sys

from . import app, config
from .log import set_debug

SWITCHES = {"on": True, "off": False, "default": None}


class SnapCmd(cmd.Cmd):
    prompt = ">> "
    intro = "Snap zones demo. Type help or ? to list commands."

    def __init__(self, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        self.variant = config.DEFAULT_VARIANT
        self.pluck = None

    def do_variants(self, arg):
        """Show the available demo variants.
        Usage: variants
        """
        for name, v in config.VARIANTS.items():
            mark = "*" if name == self.variant else " "
            print(f"{mark} {name:8} {v.title}", file=self.stdout)

    def do_play(self, arg):
        """Open the demo window and block until it is closed.
        Usage: play [classic|pluck|ripple]
        Without an argument the last played variant is used.
        """
        args = shlex.split(arg)
        name = args[0] if args else self.variant
        try:
            config.get_variant(name)
        except ValueError as exc:
            print(exc, file=self.stdout)
            return
        self.variant = name
        app.run(name, pluck=self.pluck)

    def complete_play(self, text, line, begidx, endidx):
        return [n for n in config.VARIANTS if n.startswith(text)]

    def do_pluck(self, arg):
        """Force pluck on or off, or go back to the variant's default.
        Usage: pluck on|off|default
        """
        key = arg.strip().lower()
        if key not in SWITCHES:
            print("Usage: pluck on|off|default", file=self.stdout)
            return
        self.pluck = SWITCHES[key]
        print(f"Pluck: {key}", file=self.stdout)

    def complete_pluck(self, text, line, begidx, endidx):
        return [s for s in SWITCHES if s.startswith(text)]

    def do_debug(self, arg):
        """Toggle debug logging.
        Usage: debug on|off
        """
        key = arg.strip().lower()
        if key not in ("on", "off"):
            print("Usage: debug on|off", file=self.stdout)
            return
        set_debug(key == "on")
        print(f"Debug logging: {key}", file=self.stdout)

    def do_quit(self, arg):
        """Exit the shell.
        Usage: quit
        """
        print("Bye", file=self.stdout)
        return True

    do_EOF = do_quit

    def emptyline(self):
        pass


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    shell = SnapCmd()
    if argv:
        shell.onecmd(shlex.join(argv))
        return
    shell.cmdloop()
