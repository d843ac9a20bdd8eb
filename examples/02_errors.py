"""
Error handling - Invalid input and unsupported bases
"""
from encodex import TranslationUnit, Settings, Base, TranslationError


def main():
    inputs = [b"Zm9vYmFy", b"Zg=", b"Zg#=", b"Zg==Zm9v"]
    settings = Settings.for_decoding()

    for data in inputs:
        unit = TranslationUnit(data, settings)
        try:
            print(f"{data!r} -> {unit.translate()!r}")
        except TranslationError as e:
            print(f"{data!r} failed: {type(e).__name__}: {e}")

    # Base32 is accepted by Settings but has no codec yet
    try:
        TranslationUnit(b"foo", Settings.for_encoding(Base.BASE32)).translate()
    except TranslationError as e:
        print(f"Base32: {e}")


if __name__ == "__main__":
    main()
