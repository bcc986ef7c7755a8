import sys
from pprint import pprint
from lexer import tokenize, print_tokens
from parser import parse
from compiler import compile
from errors import CompileError

def read_input(argv):
    if len(argv) == 2:
        with open(argv[1], "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()

def usage():
    print("Usage:")
    print("  python main.py lex < input.sx")
    print("  python main.py parse < input.sx")
    print("  python main.py gen < input.sx")
    print("  or:")
    print("  python main.py lex file.sx")
    print("  python main.py parse file.sx")
    print("  python main.py gen file.sx")

def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) < 2 or argv[1].lower() not in ("lex", "parse", "gen"):
        usage()
        return 1

    mode = argv[1].lower()
    try:
        data = read_input(argv[1:])
    except FileNotFoundError:
        print(f"Error: File '{argv[2]}' not found")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading file: {e}")
        return 1

    try:
        if mode == "lex":
            print_tokens(tokenize(data))
        elif mode == "parse":
            pprint(parse(tokenize(data)))
        else:
            print(compile(data))
    except CompileError as e:
        print(str(e))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
