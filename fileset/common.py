import sys


def printf(fmt, *args, **kwargs):
    sys.stdout.write(fmt.format(*args, **kwargs))
    sys.stdout.write("\n")
    sys.stdout.flush()


def clean(item):
    return item.strip()


def normalize(item):
    return clean(item).lower()


def parse_lines(text):
    for line in text.replace("\r\n", "\n").split("\n"):
        line = normalize(line)
        if line:
            yield line
