import os
import sys

import pyperclip

from ederrors import HostError
from navigator import EditorHost
from utils import get_char_type, log


PROJECT_MARKS = (".git", ".hg", ".svn", ".bzr")


def find_project_root(path: str) -> str | None:
    cur = os.path.dirname(os.path.abspath(path))
    while True:
        for mark in PROJECT_MARKS:
            if os.path.exists(os.path.join(cur, mark)):
                return cur
        parent = os.path.dirname(cur)
        if parent == cur:
            return None
        cur = parent


class ConsoleHost(EditorHost):
    """A host with no screen: files are read whole and positions are character offsets."""

    def __init__(self, input_fn=input, out=sys.stdout, err=sys.stderr):
        self.input_fn = input_fn
        self.out = out
        self.err = err
        self.file: str | None = None
        self.text = ""
        self.pos = 0
        self.buffers: dict[str, str] = {}
        self.positions: dict[str, int] = {}
        self.commands = {}

    def current_file(self):
        return self.file

    def current_pos(self):
        return self.pos

    def current_word(self):
        text, x = self.text, self.pos
        if x >= len(text) or get_char_type(text[x]) != 1:
            # 光标在单词末尾
            if x > 0 and get_char_type(text[x - 1]) == 1:
                x -= 1
            else:
                return ""
        x0 = x
        while x0 > 0 and get_char_type(text[x0 - 1]) == 1:
            x0 -= 1
        x1 = x
        while x1 < len(text) - 1 and get_char_type(text[x1 + 1]) == 1:
            x1 += 1
        return text[x0 : x1 + 1]

    def open_file(self, path: str):
        path = os.path.abspath(path)
        if self.file:
            self.positions[self.file] = self.pos
        if path not in self.buffers:
            try:
                with open(path, 'r', encoding='utf-8', errors='replace') as f:
                    self.buffers[path] = f.read()
            except OSError as e:
                raise HostError(f"cannot open {path}: {e.strerror}") from e
        self.file = path
        self.text = self.buffers[path]
        self.pos = self.positions.get(path, 0)

    def buffer_lines(self):
        return self.text.splitlines()

    def goto_line(self, line: int):
        lines = self.text.splitlines(keepends=True)
        line = max(1, min(line, len(lines)))
        self.pos = sum(len(s) for s in lines[: line - 1])

    def goto_pos(self, pos: int):
        self.pos = max(0, min(pos, len(self.text)))

    def line_col(self) -> tuple[int, int]:
        """1-based line and column of the caret."""
        before = self.text[: self.pos]
        return before.count('\n') + 1, self.pos - (before.rfind('\n') + 1) + 1

    def location(self):
        y, x = self.line_col()
        return f"{self.file}:{y}:{x}"

    def project_root(self, path: str):
        return find_project_root(path)

    def filtered_list(self, title, columns, rows, search_column):
        shown = list(range(len(rows)))
        while True:
            print(title, file=self.out)
            print("    " + "\t".join(columns), file=self.out)
            for n, i in enumerate(shown):
                print(f"[{n + 1}] " + "\t".join(rows[i]), file=self.out)
            try:
                ans = self.input_fn("Select (number, filter text, empty to cancel): ").strip()
            except EOFError:
                return None
            if not ans:
                return None
            if ans.isdigit():
                if 1 <= int(ans) <= len(shown):
                    return shown[int(ans) - 1]
                continue
            key = ans.casefold()
            shown = [i for i in range(len(rows)) if key in rows[i][search_column].casefold()]

    def report_error(self, message: str):
        log(message)
        print(message, file=self.err)

    def register_command(self, menu, title, fn):
        self.commands[(menu, title)] = fn

    def run_command(self, menu, title):
        return self.commands[(menu, title)]()

    def copy_location(self) -> bool:
        if not self.file:
            return False
        try:
            pyperclip.copy(self.location())
        except pyperclip.PyperclipException as e:
            self.report_error(f"cannot copy location: {e}")
            return False
        return True
