import os
import re
from typing import NamedTuple

from ederrors import TagsFileError


Locator = int | str


class TagEntry(NamedTuple):
    name: str
    location: str
    locator: Locator
    extra: str = ""

    def fields(self) -> dict[str, str]:
        # kind 可能是单字母，也可能是 kind:xxx
        res = {}
        for field in self.extra.split('\t'):
            if not field:
                continue
            if ':' in field:
                k, v = field.split(':', 1)
                if k not in res:
                    res[k] = v
            else:
                res['kind'] = field
        return res


ROOTED = re.compile(r'^(?:[A-Za-z]:)?[/\\]')
EX_SEARCH = r'/(?:[^/\\]|\\.)*/|\?(?:[^?\\]|\\.)*\?'


def tag_line_pattern(tag: str) -> re.Pattern:
    # <tag><rest>\t<file>\t<ex_cmd>;"\t<ext_fields>
    return re.compile('^(' + re.escape(tag) + r'[^\t]*)\t([^\t]+)\t('
                      + EX_SEARCH + r'|[^\t]*?)(?:;"\t?(.*))?$')


def is_rooted(path: str) -> bool:
    return ROOTED.match(path) is not None


def strip_search(ex_cmd: str) -> str:
    """Turn a /^pattern$/ ex command into the literal text it searches for."""
    body = ex_cmd[1:]
    if len(body) and body[-1] == ex_cmd[0]:
        body = body[:-1]
    if body.startswith('^'):
        body = body[1:]
    if body.endswith('$') and not body.endswith('\\$'):
        body = body[:-1]
    return re.sub(r'\\(.)', r'\1', body)


def parse_locator(ex_cmd: str) -> Locator:
    ex_cmd = ex_cmd.strip()
    if ex_cmd.isdigit():
        return int(ex_cmd)
    if ex_cmd[:1] in ('/', '?'):
        return strip_search(ex_cmd)
    return ex_cmd


def parse_tag_line(line: str, pattern: re.Pattern, tag_base: str) -> TagEntry | None:
    m = pattern.match(line.rstrip('\r\n'))
    if not m:
        return None
    name, file, ex_cmd, ext_fields = m.groups()
    if not ex_cmd:
        return None
    if not is_rooted(file):
        file = os.path.join(tag_base, file)
    return TagEntry(name, file, parse_locator(ex_cmd), ext_fields or "")


def find_tags(tags_path: str, tag: str, tags: list[TagEntry]) -> int:
    """
    Append every entry of tags_path whose name starts with tag to tags.
    The file must be sorted by tag name: scanning stops at the first miss
    after a match. Returns the number of entries appended.
    """
    tag_base = os.path.dirname(os.path.abspath(tags_path))
    pattern = tag_line_pattern(tag)
    found: list[TagEntry] = []
    try:
        # 源码片段不一定是 utf-8
        with open(tags_path, 'r', encoding='utf-8', errors='replace') as f:
            for line in f:
                if not line.strip() or line.startswith('!_'):
                    continue
                entry = parse_tag_line(line, pattern, tag_base)
                if entry:
                    found.append(entry)
                elif found:
                    break
    except OSError as e:
        raise TagsFileError(tags_path, e.strerror or str(e)) from e
    tags.extend(found)
    return len(found)


def is_line_locator(locator: Locator) -> bool:
    return isinstance(locator, int)


def find_locator_line(locator: Locator, lines: list[str]) -> int | None:
    """Return the 1-based line the locator points at, None if the text is absent."""
    if is_line_locator(locator):
        return locator
    for i, line in enumerate(lines):
        if locator in line:
            return i + 1
    return None
