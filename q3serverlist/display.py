import re


NOT_AVAILABLE = 'N/A'

COLUMNS = (
    ('Server Name', 39),
    ('Map Name', 19),
    ('Players', 9),
    ('Game Type', 9),
)

COLOR_ESCAPE = re.compile(r'\^[^^]')

# Console font glyphs without a printable ASCII counterpart
QUAKE_CHARSET = {
    0: '.', 5: '.', 14: '.', 15: '.', 28: '.',
    1: '#', 2: '#', 3: '#', 4: '#', 6: '#', 7: '#', 8: '#', 9: '#', 11: '#',
    10: ' ', 12: ' ', 29: ' ', 30: ' ', 31: ' ', 127: ' ',
    13: '>', 16: '[', 17: ']',
    18: '0', 19: '1', 20: '2', 21: '3', 22: '4', 23: '5', 24: '6', 25: '7', 26: '8', 27: '9',
    128: '(', 129: '=', 130: ')', 131: '#', 132: '#', 133: '.', 134: '#', 135: '#',
    136: '#', 137: '#', 138: ' ', 139: '#', 140: ' ', 141: '>', 142: '.', 143: '.',
}


def quake_chars(text):
    chars = []
    for c in text:
        code = ord(c)
        if 143 < code < 255:
            code -= 128
        chars.append(QUAKE_CHARSET.get(code, chr(code)))
    return ''.join(chars)


def printable(text):
    return quake_chars(COLOR_ESCAPE.sub('', text))


def server_cells(info):
    players = NOT_AVAILABLE
    if 'clients' in info and 'sv_maxclients' in info:
        players = f"{info['clients']}/{info['sv_maxclients']}"
    return (
        info.get('hostname', NOT_AVAILABLE),
        info.get('mapname', NOT_AVAILABLE),
        players,
        info.get('gametype', NOT_AVAILABLE),
    )


def format_row(cells):
    parts = []
    for value, (_, width) in zip(cells, COLUMNS):
        value = printable(value)[:width]
        parts.append(f"{value:<{width}}")
    return ' '.join(parts)


def format_header():
    titles = format_row([title for title, _ in COLUMNS]).rstrip()
    rules = format_row(['-' * len(title) for title, _ in COLUMNS]).rstrip()
    return f"{titles}\n{rules}"


def print_header():
    print()
    print(format_header())


def print_server(entry):
    print(format_row(server_cells(entry.info)))
