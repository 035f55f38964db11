import re

from tagparse import TagEntry


TITLE = "Go To"
COLUMNS = ["Name", "File", "Line:", "Extra Information"]
SEARCH_COLUMN = 1


def file_only(path: str):
    return re.split(r'[/\\]', path)[-1]


def extra_info(tag: TagEntry):
    # 不显示 kind
    return "\t".join(f"{k}:{v}" for k, v in tag.fields().items() if k != "kind")


def tag_row(tag: TagEntry) -> tuple[str, str, str, str]:
    return (tag.name,
            file_only(tag.location),
            str(tag.locator).lstrip(),
            extra_info(tag))


def tag_rows(tags: list[TagEntry]):
    return [tag_row(tag) for tag in tags]


def choose_tag(tags: list[TagEntry], host) -> TagEntry | None:
    """
    Pick one entry out of tags. A single candidate is returned as is,
    several are offered through host.filtered_list; None when there is
    nothing to pick or the user cancelled.
    """
    if not tags:
        return None
    if len(tags) == 1:
        return tags[0]
    i = host.filtered_list(TITLE, COLUMNS, tag_rows(tags), SEARCH_COLUMN)
    if i is None or not 0 <= i < len(tags):
        return None
    return tags[i]
