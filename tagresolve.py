"""
tags 文件的查找顺序：
1. 当前文件所在目录下的 tags
2. 项目根目录下的 tags
3. 为项目根目录登记的 tags（一个或多个）
4. 全局登记的 tags
"""

import os
from typing import Callable, NamedTuple

from ederrors import TagsFileError
from tagparse import TagEntry, find_tags
from utils import log


TAGS_NAME = "tags"


class SingleTags(NamedTuple):
    path: str


class ManyTags(NamedTuple):
    paths: list[str]


ProjectTags = SingleTags | ManyTags


class TagsConfig:
    def __init__(self):
        self.projects: dict[str, ProjectTags] = {}
        self.globals: list[str] = []

    @staticmethod
    def norm_root(root: str):
        return os.path.abspath(root)

    def add_global(self, path: str):
        self.globals.append(path)

    def remove_global(self, path: str):
        if path in self.globals:
            self.globals.remove(path)

    def set_project(self, root: str, tags: ProjectTags):
        self.projects[self.norm_root(root)] = tags

    def add_project(self, root: str, path: str):
        root = self.norm_root(root)
        match self.projects.get(root):
            case None:
                self.projects[root] = SingleTags(path)
            case SingleTags(old):
                self.projects[root] = ManyTags([old, path])
            case ManyTags(paths):
                self.projects[root] = ManyTags(paths + [path])

    def project(self, root: str) -> ProjectTags | None:
        return self.projects.get(self.norm_root(root))

    def clear_project(self, root: str):
        self.projects.pop(self.norm_root(root), None)

    def project_paths(self, root: str) -> list[str]:
        match self.project(root):
            case SingleTags(path):
                return [path]
            case ManyTags(paths):
                return list(paths)
        return []

    def clear(self):
        self.projects.clear()
        self.globals.clear()


class TagResolver:
    def __init__(self, config: TagsConfig,
                 project_root: Callable[[str], str | None] = lambda _: None,
                 report_error: Callable[[str], None] | None = None):
        self.config = config
        self.project_root = project_root
        self.report_error = report_error

    def tags_files(self, file: str | None) -> list[str]:
        """Candidate tags files for file, in search order, each listed once."""
        files = []
        base = os.path.dirname(os.path.abspath(file)) if file else os.getcwd()
        files.append(os.path.join(base, TAGS_NAME))
        if file and (root := self.project_root(file)):
            files.append(os.path.join(root, TAGS_NAME))
            files.extend(self.config.project_paths(root))
        files.extend(self.config.globals)
        res, seen = [], set()
        for path in files:
            if (key := os.path.abspath(path)) not in seen:
                seen.add(key)
                res.append(path)
        return res

    def scan(self, tags_path: str, tag: str, tags: list[TagEntry]):
        # 登记了但不存在的文件与目录下的 tags 一样直接跳过
        if not os.path.isfile(tags_path):
            return
        try:
            n = find_tags(tags_path, tag, tags)
            log(f"scanned {tags_path} for {tag!r}: {n} match(es)")
        except TagsFileError as e:
            log(str(e))
            if self.report_error:
                self.report_error(str(e))

    def resolve(self, file: str | None, tag: str) -> list[TagEntry]:
        tags: list[TagEntry] = []
        for tags_path in self.tags_files(file):
            self.scan(tags_path, tag, tags)
        # 同一条目可能出现在多个 tags 中，保留最先发现的
        return list(dict.fromkeys(tags))
