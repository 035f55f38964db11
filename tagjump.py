"""
tagjump.py [-f FILE] [-p POS] [-t TAGS]... [-r ROOT=TAGS]... [-c] [-i] [-l] [TAG]
"""

import sys

from consolehost import ConsoleHost
from ederrors import EditorError
from navigator import MENU, TagNavigator
from tagresolve import TagResolver, TagsConfig


USAGE = __doc__.strip()

INTERACTIVE_HELP = """\
t NAME  goto tag NAME
w       goto tag under caret
b       jump back
f       jump forward
p POS   move caret
l       list jump history
q       quit"""


class Args:
    def __init__(self):
        self.file: str | None = None
        self.pos = 0
        self.tag: str | None = None
        self.copy = False
        self.interactive = False
        self.list_only = False
        self.config = TagsConfig()


def parse_args(argv: list[str]) -> Args:
    args = Args()
    it = iter(argv)
    for arg in it:
        try:
            if arg == "-f":
                args.file = next(it)
            elif arg == "-p":
                args.pos = int(next(it))
            elif arg == "-t":
                args.config.add_global(next(it))
            elif arg == "-r":
                root, sep, path = next(it).partition("=")
                if not sep:
                    raise EditorError("-r expects ROOT=TAGS")
                args.config.add_project(root, path)
            elif arg == "-c":
                args.copy = True
            elif arg == "-i":
                args.interactive = True
            elif arg == "-l":
                args.list_only = True
            elif arg.startswith("-"):
                raise EditorError(f"unknown option {arg}")
            else:
                args.tag = arg
        except StopIteration:
            raise EditorError(f"{arg} expects a value") from None
        except ValueError:
            raise EditorError(f"{arg} expects a number") from None
    return args


def interactive(nav: TagNavigator, host: ConsoleHost):
    print(INTERACTIVE_HELP, file=host.out)
    while True:
        try:
            line = host.input_fn("> ").strip()
        except EOFError:
            return
        cmd, _, arg = line.partition(" ")
        if cmd == "q":
            return
        elif cmd == "t" and arg:
            nav.goto_tag(arg.strip())
        elif cmd == "w":
            host.run_command(MENU, "Goto Ctag")
        elif cmd == "b":
            host.run_command(MENU, "Jump Back")
        elif cmd == "f":
            host.run_command(MENU, "Jump Forward")
        elif cmd == "p" and arg.strip().isdigit():
            host.goto_pos(int(arg))
        elif cmd == "l":
            for i, rec in enumerate(nav.history.records):
                mark = "*" if i + 1 == nav.history.pos else " "
                print(f"{mark} {rec.location}:{rec.position}", file=host.out)
            continue
        elif cmd:
            print(INTERACTIVE_HELP, file=host.out)
            continue
        if host.file:
            print(host.location(), file=host.out)


def list_tags(nav: TagNavigator, host: ConsoleHost, tag: str | None) -> int:
    tag = tag or host.current_word()
    tags = nav.find(tag) if tag else []
    for entry in tags:
        print(f"{entry.name}\t{entry.location}\t{entry.locator}", file=host.out)
    return 0 if tags else 1


def main(argv: list[str] | None = None, host: ConsoleHost | None = None) -> int:
    host = host or ConsoleHost()
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
        if args.file:
            host.open_file(args.file)
            host.goto_pos(args.pos)
    except EditorError as e:
        print(e, file=host.err)
        print(USAGE, file=host.err)
        return 2

    resolver = TagResolver(args.config, host.project_root, host.report_error)
    nav = TagNavigator(host, resolver)
    nav.register_commands()

    if args.interactive:
        interactive(nav, host)
        return 0

    if args.list_only:
        return list_tags(nav, host, args.tag)

    if not nav.goto_tag(args.tag):
        return 1
    print(host.location(), file=host.out)
    if args.copy:
        host.copy_location()
    return 0


if __name__ == '__main__':
    sys.exit(main())
