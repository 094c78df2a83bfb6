"""Pull tokens one at a time and print them until end of input."""

from kara import Scanner, TokenType

source = """
record Point {
    x: i64,
    y: i64,
}

// A comment to be ignored

flow main {
    let p1 = Point { x: 10, y: 20 };
    p1 -> print;
}
"""

scanner = Scanner(source)
while True:
    token = scanner.next_token()
    print(token)
    if token.type is TokenType.EOF:
        break
