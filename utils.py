import time


LOG_FILE = "tagjump.log"


def log(s):
    with open(LOG_FILE, "a", encoding="utf8") as f:
        f.write(str(s) + " " + time.strftime("%Y-%m-%d %H:%M:%S") + "\n")


def get_char_type(ch: str) -> int:
    if ch.isspace():
        return 0
    if ch.isalnum() or ch == '_':
        return 1
    return 2
