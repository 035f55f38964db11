from enum import Enum, unique

from ederrors import HostError
from jumplist import JumpHistory, JumpRecord
from tagparse import TagEntry, find_locator_line, is_line_locator
from tagresolve import TagResolver
from tagselect import choose_tag
from utils import log


MENU = "Ctags"


@unique
class NavState(Enum):
    Idle = 0
    Resolving = 1
    Disambiguating = 2
    Recording = 3
    Moving = 4


class EditorHost:
    """What the navigator needs from the editor it runs in."""

    def current_file(self) -> str | None:
        raise NotImplementedError

    def current_pos(self) -> int:
        raise NotImplementedError

    def current_word(self) -> str:
        raise NotImplementedError

    def open_file(self, path: str):
        raise NotImplementedError

    def goto_line(self, line: int):
        """line is 1-based"""
        raise NotImplementedError

    def goto_pos(self, pos: int):
        raise NotImplementedError

    def buffer_lines(self) -> list[str]:
        raise NotImplementedError

    def project_root(self, path: str) -> str | None:
        raise NotImplementedError

    def filtered_list(self, title: str, columns: list[str],
                      rows: list[tuple[str, ...]], search_column: int) -> int | None:
        """Index of the chosen row, None if cancelled."""
        raise NotImplementedError

    def report_error(self, message: str):
        raise NotImplementedError

    def register_command(self, menu: str, title: str, fn):
        raise NotImplementedError


class TagNavigator:
    def __init__(self, host: EditorHost, resolver: TagResolver,
                 history: JumpHistory | None = None):
        self.host = host
        self.resolver = resolver
        self.history = history if history is not None else JumpHistory()
        self.state = NavState.Idle
        self.registered = False

    def find(self, tag: str) -> list[TagEntry]:
        return self.resolver.resolve(self.host.current_file(), tag)

    def goto_tag(self, tag: str | None = None) -> bool:
        """Jump to the definition of tag, or of the word under the caret."""
        try:
            return self._goto_tag(tag)
        finally:
            self.state = NavState.Idle

    def _goto_tag(self, tag: str | None) -> bool:
        self.state = NavState.Resolving
        if tag is None:
            tag = self.host.current_word()
        if not tag:
            return False
        tags = self.find(tag)
        if not tags:
            log(f"no tag {tag!r}")
            return False
        if len(tags) > 1:
            self.state = NavState.Disambiguating
        entry = choose_tag(tags, self.host)
        if entry is None:
            return False

        self.state = NavState.Recording
        departure = self.host.current_file(), self.host.current_pos()
        self.state = NavState.Moving
        try:
            self.move_to(entry)
        except HostError as e:
            # 没有打开目标就不记录出发点
            log(str(e))
            self.host.report_error(str(e))
            return False
        self.state = NavState.Recording
        self.history.record_if_changed(*departure)
        self.history.push(self.host.current_file(), self.host.current_pos())
        log(f"goto tag {entry.name!r} -> {entry.location}:{entry.locator}")
        return True

    def move_to(self, entry: TagEntry):
        self.host.open_file(entry.location)
        if is_line_locator(entry.locator):
            self.host.goto_line(entry.locator)
        elif line := find_locator_line(entry.locator, self.host.buffer_lines()):
            self.host.goto_line(line)

    def restore(self, rec: JumpRecord | None) -> bool:
        if rec is None:
            return False
        if rec.location:
            self.host.open_file(rec.location)
        self.host.goto_pos(rec.position)
        log(f"jump to {rec.location}:{rec.position} ({self.history.pos}/{len(self.history)})")
        return True

    def jump_back(self, *_) -> bool:
        return self.restore(self.history.step_back())

    def jump_forward(self, *_) -> bool:
        return self.restore(self.history.step_forward())

    def goto_tag_cmd(self, *_):
        return self.goto_tag()

    def register_commands(self, host: EditorHost | None = None):
        """Call once the host has finished starting up, so key bindings show correctly."""
        if self.registered:
            return
        host = host or self.host
        host.register_command(MENU, "Goto Ctag", self.goto_tag_cmd)
        host.register_command(MENU, "Jump Back", self.jump_back)
        host.register_command(MENU, "Jump Forward", self.jump_forward)
        self.registered = True
        log("ctags commands registered")
