"""
Input sources - Translate several files and strings
"""
from pathlib import Path

from encodex import InputSource, InputReadError, TranslationUnit, Settings


def main():
    source = InputSource(Path.cwd())

    for name in ["pyproject.toml", "does-not-exist.txt"]:
        try:
            source.add_file(name)
        except InputReadError as e:
            print(f"Skipping: {e}")

    source.add_literal("foobar")

    for data in source:
        unit = TranslationUnit(data, Settings.for_encoding())
        print(unit.translate().decode("ascii"))


if __name__ == "__main__":
    main()
