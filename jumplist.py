from typing import NamedTuple


class JumpRecord(NamedTuple):
    location: str | None
    position: int


# 线性的，不像 UndoTree 那样保留分支
class JumpHistory:
    def __init__(self):
        self.records: list[JumpRecord] = []
        self.pos = 0  # 指向当前记录的下一个，0 表示还没有记录

    def __len__(self):
        return len(self.records)

    def __str__(self):
        return f"JumpHistory({self.pos}, {self.records})"

    __repr__ = __str__

    def current(self) -> JumpRecord | None:
        return self.records[self.pos - 1] if self.pos else None

    def truncate(self):
        del self.records[self.pos:]

    def push(self, location: str | None, position: int):
        self.truncate()
        self.records.append(JumpRecord(location, position))
        self.pos = len(self.records)

    def record_if_changed(self, location: str | None, position: int) -> bool:
        """push, unless the record at pos is the same place."""
        if self.current() == (location, position):
            self.truncate()
            return False
        self.push(location, position)
        return True

    def step_back(self) -> JumpRecord | None:
        if self.pos <= 1:
            return None
        self.pos -= 1
        return self.records[self.pos - 1]

    def step_forward(self) -> JumpRecord | None:
        if self.pos >= len(self.records):
            return None
        self.pos += 1
        return self.records[self.pos - 1]
